"""Infrastructure Layer.

Adapters that sit between the pure domain and the outside world (console
output, command-line harnesses).
"""

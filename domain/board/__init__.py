"""Board Bounded Context.

Responsible for the spatial model that bots and signals live on:
- Value Objects: CoordinatePair, BotOccupant, SignalSource, GridIndex
- Entities: OccupancyMap, SignalMap, Board
- Services: BoardController, forward_delta
"""

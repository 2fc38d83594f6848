"""Type hints used in Impaired."""

from typing import Callable, Dict, Hashable, List, Literal, Tuple, TypeVar

# Wrapped item value
T = TypeVar("T", bound=Hashable)

# Which side of a comparison was chosen
LEFT = "left"
RIGHT = "right"
Side = Literal["left", "right"]

# Content hash identifying a session item
ItemHandle = str

# Item -> number of wins
ScoreMap = Dict["Item", int]
# (item, wins), best first
RankedScores = List[Tuple["Item", int]]
# (rank, item, wins), standard competition ranking
Standings = List[Tuple[int, "Item", int]]

# Picks a side for (left, right); raises KeyboardInterrupt to abort the loop
Chooser = Callable[["SessionItem", "SessionItem"], Side]

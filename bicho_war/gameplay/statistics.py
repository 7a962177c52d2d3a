"""
Session statistics.
NO UI DEPENDENCIES.
"""
from dataclasses import asdict, dataclass
from typing import Any, Dict

from .creatures import CreatureType


@dataclass
class GameStatistics:
    """
    Counters for one game session.

    Only the engine updates these, and they never go down.
    """
    turns: int = 0
    shots_fired: int = 0
    shots_hit: int = 0
    bombs_used: int = 0
    mutations_performed: int = 0
    bichos_defeated: int = 0
    total_points: int = 0

    def increment_turns(self) -> None:
        self.turns += 1

    def record_shot(self, hit: bool) -> None:
        """Record a bullet and whether it hit a living creature."""
        self.shots_fired += 1
        if hit:
            self.shots_hit += 1

    def record_bomb(self) -> None:
        self.bombs_used += 1

    def record_mutation(self) -> None:
        self.mutations_performed += 1

    def record_defeat(self, creature_type: CreatureType) -> None:
        """Count a kill and award the points for its type."""
        self.bichos_defeated += 1
        self.total_points += creature_type.points

    @property
    def accuracy(self) -> float:
        """Percentage of shots that hit (0-100), 0 if nothing was fired."""
        if self.shots_fired == 0:
            return 0.0
        return self.shots_hit * 100.0 / self.shots_fired

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["accuracy"] = self.accuracy
        return data

    def report(self) -> str:
        """Multi-line plain text summary of the session."""
        lines = [
            "GAME STATISTICS",
            f"Turns played:    {self.turns:>9d}",
            f"Shots fired:     {self.shots_fired:>9d}",
            f"Shots hit:       {self.shots_hit:>9d}",
            f"Accuracy:        {self.accuracy:>8.1f}%",
            f"Bombs used:      {self.bombs_used:>9d}",
            f"Mutations:       {self.mutations_performed:>9d}",
            f"Bichos defeated: {self.bichos_defeated:>9d}",
            f"Total points:    {self.total_points:>9d}",
        ]
        return "\n".join(lines)

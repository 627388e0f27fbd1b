from backend.engine.gamescoring.scorer import Scorer

__all__ = ["Scorer"]

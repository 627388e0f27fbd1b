from backend.engine.gameplay.game import GameSession, Outcome

__all__ = ["GameSession", "Outcome"]

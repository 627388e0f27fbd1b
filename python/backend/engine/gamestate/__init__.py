from backend.engine.gamestate.state import SelectionState, line_between

__all__ = ["SelectionState", "line_between"]

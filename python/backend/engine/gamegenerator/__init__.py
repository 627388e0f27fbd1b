from backend.engine.gamegenerator.generator import GenerationResult, GridGenerator

__all__ = ["GenerationResult", "GridGenerator"]

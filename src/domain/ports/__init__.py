from src.domain.ports.text_similarity_port import TextSimilarity

__all__ = ["TextSimilarity"]

from .http import SourceFetcher
from .parser import RdfParser

__all__ = ["RdfParser", "SourceFetcher"]

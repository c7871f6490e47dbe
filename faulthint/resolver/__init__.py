from faulthint.resolver.fix_extractor import FixExtractor
from faulthint.resolver.resolver import HintResolver, Resolution, Tier

__all__ = ["FixExtractor", "HintResolver", "Resolution", "Tier"]

"""
Crawl pipeline.

Stages, in order:
1. names: catalog → candidate names
2. resolver: candidate names → matched names (bounded waves)
3. effects: matched names → effect map (fan-out)

runner.EffectPipeline sequences the stages and persists the result.
"""

from pw_effects.pipeline.effects import EffectExtractor
from pw_effects.pipeline.names import extract_names
from pw_effects.pipeline.resolver import BatchResolver
from pw_effects.pipeline.runner import EffectPipeline, run_pipeline

__all__ = ["BatchResolver", "EffectExtractor", "EffectPipeline", "extract_names", "run_pipeline"]

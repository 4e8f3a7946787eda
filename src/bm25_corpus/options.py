"""
Corpus configuration.

Options are resolved once, at corpus construction, by layering caller-supplied
fields over DEFAULT_OPTIONS. Numeric knobs are not range-checked: out-of-range
values (negative k1, b outside [0, 1]) flow straight into the BM25 formula.
"""

import logging
from typing import Any, Callable, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import CorpusConfigurationError
from .tokenizer import default_processor

logger = logging.getLogger(__name__)


class CorpusOptions(BaseModel):
    """Resolved, immutable corpus configuration"""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    processor: Callable[[Any], List[str]] = Field(
        default=default_processor,
        description="Maps a raw document to its ordered token list"
    )
    k1: float = Field(default=1.5, description="Term frequency saturation")
    b: float = Field(default=0.75, description="Document length normalization strength")
    gamma: float = Field(default=0.0, description="Additive per-term score floor (inside idf)")


DEFAULT_OPTIONS = CorpusOptions()


def resolve_options(
    options: Optional[Union[CorpusOptions, Mapping[str, Any]]] = None,
    **overrides: Any
) -> CorpusOptions:
    """
    Build resolved options from defaults, an options object/mapping and keyword overrides.

    Later layers win: defaults < options < overrides. Fields given as None keep
    their default.

    Args:
        options: A CorpusOptions instance or a mapping with any subset of
            processor, k1, b, gamma
        **overrides: Individual fields, applied last

    Returns:
        Frozen CorpusOptions

    Raises:
        CorpusConfigurationError: Unknown option name, non-numeric k1/b/gamma,
            or non-callable processor

    Example:
        >>> opts = resolve_options({"k1": 1.2}, b=0.5)
        >>> (opts.k1, opts.b, opts.gamma)
        (1.2, 0.5, 0.0)
    """
    if options is None:
        fields = {}
    elif isinstance(options, CorpusOptions):
        fields = {name: getattr(options, name) for name in CorpusOptions.model_fields}
    else:
        fields = dict(options)
    fields.update(overrides)

    # None means "not specified" - keep the default
    fields = {name: value for name, value in fields.items() if value is not None}
    if not fields:
        return DEFAULT_OPTIONS

    try:
        resolved = CorpusOptions(**fields)
    except ValidationError as e:
        raise CorpusConfigurationError(f"Invalid corpus options: {e}") from e

    logger.debug(f"Resolved corpus options: k1={resolved.k1}, b={resolved.b}, gamma={resolved.gamma}")
    return resolved

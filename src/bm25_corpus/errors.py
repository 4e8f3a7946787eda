"""Exceptions raised at corpus configuration boundaries"""


class CorpusConfigurationError(ValueError):
    """Invalid corpus options, or a payload the configured processor cannot handle"""

from .annotations import (
    AGGREGATOR_LABEL,
    AGGREGATOR_VALUE,
    AnnotationsQuerier,
    is_aggregator,
    new_querier,
    querier_from_mapping,
)

__all__ = [
    "AGGREGATOR_LABEL",
    "AGGREGATOR_VALUE",
    "AnnotationsQuerier",
    "is_aggregator",
    "new_querier",
    "querier_from_mapping",
]

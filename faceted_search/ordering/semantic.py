"""Semantic-weight adjustment of ordering specs."""

from faceted_search.ordering.models import OrderingSpec


def apply_semantic_weight(
    spec: OrderingSpec,
    search_term: str | None,
    use_semantic_search: bool,
    semantic_weight: float,
) -> OrderingSpec:
    """Bias an ordering spec toward semantic similarity.

    The weight is only applied when semantic search is enabled, there is
    a non-blank search term, and the spec is not already a pure semantic
    ranking. In every other case the input spec itself is returned.

    Args:
        spec: Spec resolved for one content query.
        search_term: Free-text query of the request.
        use_semantic_search: Whether semantic search is enabled.
        semantic_weight: Weight to attach.

    Returns:
        A new spec carrying the weight, or ``spec`` unchanged.
    """
    if not use_semantic_search:
        return spec
    if not search_term or not search_term.strip():
        return spec
    if spec.is_semantic_ranking:
        return spec
    return spec.model_copy(update={"semantic_weight": semantic_weight})

"""Search criteria predicates: one filter per SearchRequest group"""

from docstore.models import Document, SearchRequest


def _title_matches(doc: Document, prefixes: list[str]) -> bool:
    title = doc.title or ""
    return any(title.startswith(p) for p in prefixes)


def _content_matches(doc: Document, needles: list[str]) -> bool:
    content = doc.content or ""
    return any(n in content for n in needles)


def _created_within(doc: Document, request: SearchRequest) -> bool:
    """Inclusive on both bounds; either bound may be absent."""
    if doc.created is None:
        return False
    if request.created_from is not None and doc.created < request.created_from:
        return False
    if request.created_to is not None and doc.created > request.created_to:
        return False
    return True


def filter_documents(docs: list[Document], request: SearchRequest) -> list[Document]:
    """Return docs satisfying every present criteria group, preserving input order.

    Empty or absent groups impose no constraint.
    """
    result = list(docs)
    if request.title_prefixes:
        result = [d for d in result if _title_matches(d, request.title_prefixes)]
    if request.contains_contents:
        result = [d for d in result if _content_matches(d, request.contains_contents)]
    if request.author_ids:
        ids = set(request.author_ids)
        result = [d for d in result if d.author.id in ids]
    if request.created_from is not None or request.created_to is not None:
        result = [d for d in result if _created_within(d, request)]
    return result

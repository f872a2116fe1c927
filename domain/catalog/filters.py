"""In-memory question filtering."""

from collections.abc import Iterable
from urllib.parse import urlsplit

from domain.schemas import PLATFORMS, Question, QuestionQuery, QuestionView, SearchResult
from domain.taxonomy.normalizer import TagNormalizer, to_screaming_snake_case


def slug_to_title(slug: str | None) -> str | None:
    """
    Build a display title from a problem slug.

    Examples:
        >>> slug_to_title("two-sum")
        'Two Sum'
    """
    if not slug:
        return None
    return " ".join(part[:1].upper() + part[1:] for part in slug.split("-"))


def slug_from_url(url: str) -> str | None:
    """
    Last non-empty path segment of a problem URL, lower-cased.

    Examples:
        >>> slug_from_url("https://leetcode.com/problems/Two-Sum/")
        'two-sum'
        >>> slug_from_url("leetcode.com") is None
        True
    """
    url = url.strip().lower()
    parts = urlsplit(url if "//" in url else "//" + url)
    segments = [p for p in parts.path.split("/") if p]
    return segments[-1] if segments else None


def list_tag_names(questions: Iterable[Question]) -> list[str]:
    """Distinct stored tag names across the bank, sorted."""
    return sorted({name for q in questions for name in q.tags if name})


def infer_platforms(topics: set[str], platform: str | None) -> set[str]:
    """
    Resolve which platforms the caller wants.

    A topic that normalizes to a platform name (e.g. "leetcode") opts that
    platform in; an explicit platform replaces whatever was inferred.
    """
    if platform is not None:
        return {platform}
    return {p for p in PLATFORMS if p in topics}


def _matches_topics(question: Question, topics: set[str]) -> bool:
    return any(to_screaming_snake_case(name) in topics for name in question.tags if name)


def _broad_pool(questions: list[Question], size: int) -> list[Question]:
    # most recent first; undated questions go last and keep their input order
    ordered = sorted(
        questions,
        key=lambda q: (q.created_at is not None, q.created_at.timestamp() if q.created_at else 0.0),
        reverse=True,
    )
    return ordered[:size]


def filter_questions(
    questions: list[Question],
    query: QuestionQuery,
    normalizer: TagNormalizer,
    *,
    solved_ids: set[str] | None = None,
    bookmarked_ids: set[str] | None = None,
    default_limit: int = 50,
    max_limit: int = 100,
    broad_pool_size: int = 500,
) -> SearchResult:
    """
    Filter the question bank by topics, platform, difficulty, slug/url and solved state.

    Pool selection:
      - questions carrying at least one tag whose SCREAMING_SNAKE_CASE form is a
        normalized topic, if any exist
      - otherwise, when a platform is wanted or no topics were given, the
        `broad_pool_size` most recent questions
      - otherwise nothing

    The remaining filters narrow the pool in order: platform URL presence,
    difficulty, slug (or url-derived slug, or url domain), unsolved_only.

    Args:
        questions: Full question bank
        query: Search criteria
        normalizer: Tag normalizer used for the query topics
        solved_ids: Question ids the user has an accepted submission for
        bookmarked_ids: Question ids the user has bookmarked
        default_limit: Limit used when query.limit is None
        max_limit: Upper bound for the result size
        broad_pool_size: Size of the most-recent pool used without a tag match

    Returns:
        SearchResult with decorated questions (truncated) and the pre-limit match count
    """
    solved_ids = solved_ids or set()
    bookmarked_ids = bookmarked_ids or set()

    topics = normalizer.normalize_tags(query.topics)
    platforms = infer_platforms(topics, query.platform)

    tagged = [q for q in questions if _matches_topics(q, topics)] if topics else []
    if tagged:
        pool = tagged
    elif platforms or not topics:
        pool = _broad_pool(questions, broad_pool_size)
    else:
        pool = []

    items = [
        QuestionView(
            **q.model_dump(),
            title=slug_to_title(q.slug) or q.slug,
            is_solved=q.id in solved_ids,
            is_bookmarked=q.id in bookmarked_ids,
        )
        for q in pool
    ]

    for platform in platforms:
        items = [q for q in items if q.url_for(platform)]

    difficulties = query.difficulties
    if difficulties:
        items = [q for q in items if q.difficulty in difficulties]

    if query.slug:
        wanted = query.slug.strip().lower()
        items = [q for q in items if q.slug.lower() == wanted]
    elif query.url:
        wanted = slug_from_url(query.url)
        if wanted:
            items = [q for q in items if q.slug.lower() == wanted]
        else:
            url = query.url.strip().lower()
            if "leetcode" in url:
                items = [q for q in items if q.leetcode_url]
            if "codechef" in url:
                items = [q for q in items if q.codechef_url]

    if query.unsolved_only:
        items = [q for q in items if not q.is_solved]

    limit = query.limit if query.limit is not None else default_limit
    limit = min(max(limit, 1), max_limit)

    return SearchResult(
        questions=items[:limit],
        normalized_topics=sorted(topics),
        platforms=sorted(platforms),
        total_matched=len(items),
    )

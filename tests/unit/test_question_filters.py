from datetime import datetime

from domain.catalog import filter_questions, infer_platforms, list_tag_names, slug_from_url, slug_to_title
from domain.schemas import Question, QuestionQuery
from domain.taxonomy import TagNormalizer


def _mk_question(qid: str, slug: str, difficulty: str = "EASY", tags: list[str] | None = None, **kwargs) -> Question:
    return Question(id=qid, slug=slug, difficulty=difficulty, tags=tags or [], **kwargs)


def _bank() -> list[Question]:
    return [
        _mk_question(
            "q1",
            "two-sum",
            tags=["Hashtables", "1D Arrays"],
            leetcode_url="https://leetcode.com/problems/two-sum/",
            created_at=datetime(2024, 1, 1),
        ),
        _mk_question(
            "q2",
            "valid-palindrome",
            tags=["Two Pointers"],
            leetcode_url="https://leetcode.com/problems/valid-palindrome/",
            created_at=datetime(2024, 1, 2),
        ),
        _mk_question(
            "q3",
            "flow001",
            difficulty="BEGINNER",
            tags=["Loops"],
            codechef_url="https://www.codechef.com/problems/FLOW001",
            created_at=datetime(2024, 1, 3),
        ),
        _mk_question(
            "q4",
            "trapping-rain-water",
            difficulty="HARD",
            tags=["Two Pointers", "Stack"],
            leetcode_url="https://leetcode.com/problems/trapping-rain-water/",
            created_at=datetime(2024, 1, 4),
        ),
        _mk_question(
            "q5",
            "watermelon",
            difficulty="BEGINNER",
            tags=["If Else"],
            codeforces_url="https://codeforces.com/problemset/problem/4/A",
            created_at=datetime(2024, 1, 5),
        ),
    ]


def _ids(result) -> list[str]:
    return [q.id for q in result.questions]


def test_slug_helpers() -> None:
    assert slug_to_title("two-sum") == "Two Sum"
    assert slug_to_title("") is None
    assert slug_from_url("https://leetcode.com/problems/Two-Sum/") == "two-sum"
    assert slug_from_url("leetcode.com/problems/two-sum") == "two-sum"
    assert slug_from_url("https://leetcode.com/") is None


def test_list_tag_names_is_sorted_and_distinct() -> None:
    assert list_tag_names(_bank()) == ["1D Arrays", "Hashtables", "If Else", "Loops", "Stack", "Two Pointers"]


def test_infer_platforms() -> None:
    assert infer_platforms({"LEETCODE", "LOOPS"}, None) == {"LEETCODE"}
    assert infer_platforms({"LEETCODE"}, "CODECHEF") == {"CODECHEF"}
    assert infer_platforms({"LOOPS"}, None) == set()


def test_topic_phrases_match_stored_tag_names() -> None:
    result = filter_questions(_bank(), QuestionQuery(topics=["2 pointers"]), TagNormalizer())
    assert _ids(result) == ["q2", "q4"]
    assert result.normalized_topics == ["TWO_POINTERS"]
    assert result.total_matched == 2
    assert result.questions[0].title == "Valid Palindrome"


def test_unmatched_topic_yields_nothing() -> None:
    result = filter_questions(_bank(), QuestionQuery(topics=["linked list"]), TagNormalizer())
    assert result.questions == []
    assert result.total_matched == 0


def test_no_topics_uses_most_recent_pool() -> None:
    result = filter_questions(_bank(), QuestionQuery(), TagNormalizer(), broad_pool_size=3)
    assert _ids(result) == ["q5", "q4", "q3"]


def test_platform_inferred_from_topics_falls_back_to_broad_pool() -> None:
    result = filter_questions(_bank(), QuestionQuery(topics=["leetcode"]), TagNormalizer())
    assert result.platforms == ["LEETCODE"]
    assert _ids(result) == ["q4", "q2", "q1"]


def test_explicit_platform_overrides_inferred_platform() -> None:
    result = filter_questions(
        _bank(),
        QuestionQuery(topics=["leetcode", "loops"], platform="CODECHEF"),
        TagNormalizer(),
    )
    assert result.platforms == ["CODECHEF"]
    assert _ids(result) == ["q3"]


def test_platform_filter_applies_to_tag_matches() -> None:
    result = filter_questions(_bank(), QuestionQuery(topics=["loops"], platform="LEETCODE"), TagNormalizer())
    assert result.questions == []


def test_difficulty_single_and_list() -> None:
    single = filter_questions(_bank(), QuestionQuery(difficulty="BEGINNER"), TagNormalizer())
    assert _ids(single) == ["q5", "q3"]

    several = filter_questions(_bank(), QuestionQuery(difficulty=["HARD", "EASY"]), TagNormalizer())
    assert _ids(several) == ["q4", "q2", "q1"]


def test_slug_filter_is_case_insensitive() -> None:
    result = filter_questions(_bank(), QuestionQuery(slug="  Two-Sum "), TagNormalizer())
    assert _ids(result) == ["q1"]


def test_url_filter_uses_last_path_segment() -> None:
    result = filter_questions(
        _bank(),
        QuestionQuery(url="https://leetcode.com/problems/trapping-rain-water/"),
        TagNormalizer(),
    )
    assert _ids(result) == ["q4"]


def test_url_without_path_filters_by_domain() -> None:
    result = filter_questions(_bank(), QuestionQuery(url="https://www.codechef.com/"), TagNormalizer())
    assert _ids(result) == ["q3"]


def test_slug_takes_precedence_over_url() -> None:
    result = filter_questions(
        _bank(),
        QuestionQuery(slug="two-sum", url="https://leetcode.com/problems/valid-palindrome/"),
        TagNormalizer(),
    )
    assert _ids(result) == ["q1"]


def test_solved_and_bookmarked_flags_and_unsolved_only() -> None:
    query = QuestionQuery(topics=["two pointers"])
    flagged = filter_questions(_bank(), query, TagNormalizer(), solved_ids={"q2"}, bookmarked_ids={"q4"})
    by_id = {q.id: q for q in flagged.questions}
    assert by_id["q2"].is_solved and not by_id["q2"].is_bookmarked
    assert by_id["q4"].is_bookmarked and not by_id["q4"].is_solved

    unsolved = filter_questions(
        _bank(),
        query.model_copy(update={"unsolved_only": True}),
        TagNormalizer(),
        solved_ids={"q2"},
    )
    assert _ids(unsolved) == ["q4"]


def test_limit_is_clamped() -> None:
    bank = _bank()
    assert len(filter_questions(bank, QuestionQuery(limit=0), TagNormalizer()).questions) == 1
    assert len(filter_questions(bank, QuestionQuery(limit=2), TagNormalizer()).questions) == 2

    capped = filter_questions(bank, QuestionQuery(limit=1000), TagNormalizer(), max_limit=4)
    assert len(capped.questions) == 4
    assert capped.total_matched == 5

    default = filter_questions(bank, QuestionQuery(), TagNormalizer(), default_limit=3)
    assert len(default.questions) == 3


def test_undated_questions_keep_input_order_after_dated_ones() -> None:
    bank = [
        _mk_question("a", "a"),
        _mk_question("b", "b", created_at=datetime(2024, 5, 1)),
        _mk_question("c", "c"),
    ]
    result = filter_questions(bank, QuestionQuery(), TagNormalizer())
    assert _ids(result) == ["b", "a", "c"]

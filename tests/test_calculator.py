from growthsim.models.profile import DetectedMetrics, UserProfile
from growthsim.scoring.calculator import calculate_scores


def _make_profile(
    skills: int = 0,
    projects: int = 0,
    internships: int = 0,
    certifications: int = 0,
    interests: int = 0,
    education: str = "",
) -> UserProfile:
    return UserProfile(
        education=education,
        detected_metrics=DetectedMetrics(
            skills=[f"skill-{i}" for i in range(skills)],
            projects=[f"project-{i}" for i in range(projects)],
            internships=[f"internship-{i}" for i in range(internships)],
            certifications=[f"cert-{i}" for i in range(certifications)],
            interests=[f"interest-{i}" for i in range(interests)],
        ),
    )


def test_no_metrics_scores_zero():
    scores = calculate_scores(UserProfile())
    assert scores.to_dict() == {
        "skills_score": 0,
        "projects_score": 0,
        "internships_score": 0,
        "certifications_score": 0,
        "overall_score": 0,
    }


def test_no_metrics_with_education_only_counts_quality():
    # Profile quality still applies: 40 * 0.10
    scores = calculate_scores(UserProfile(education="BSc"))
    assert scores.skills_score == 0
    assert scores.overall_score == 4


def test_empty_metrics_and_education():
    scores = calculate_scores(_make_profile())
    assert scores.overall_score == 0
    assert scores.skills_score == 0


def test_three_skills_with_interest_and_education():
    profile = UserProfile(
        education="BSc",
        detected_metrics=DetectedMetrics(skills=["a", "b", "c"], interests=["x"]),
    )
    scores = calculate_scores(profile)
    assert scores.skills_score == 45
    assert scores.projects_score == 0
    assert scores.internships_score == 0
    assert scores.certifications_score == 0
    # 45 * 0.30 + 100 * 0.10 = 23.5 -> 24
    assert scores.overall_score == 24


def test_everything_capped_gives_full_score():
    profile = _make_profile(
        skills=7, projects=4, internships=2, certifications=3, interests=1, education="MSc",
    )
    scores = calculate_scores(profile)
    assert scores.skills_score == 100
    assert scores.projects_score == 100
    assert scores.internships_score == 100
    assert scores.certifications_score == 100
    assert scores.overall_score == 100


def test_two_skills_do_not_earn_breadth_bonus():
    # quality = 40 (education only): 30 * 0.30 + 40 * 0.10 = 13
    scores = calculate_scores(_make_profile(skills=2, education="BSc"))
    assert scores.skills_score == 30
    assert scores.overall_score == 13


def test_three_skills_earn_breadth_bonus():
    # 45 * 0.30 + 30 * 0.10 = 16.5 -> 17
    scores = calculate_scores(_make_profile(skills=3))
    assert scores.overall_score == 17


def test_rounds_half_up():
    # 15 * 0.30 = 4.5 must round to 5, not to the even 4
    assert calculate_scores(_make_profile(skills=1)).overall_score == 5


def test_whitespace_education_counts_as_present():
    blank = calculate_scores(_make_profile(education=""))
    spaces = calculate_scores(_make_profile(education="   "))
    assert blank.overall_score == 0
    assert spaces.overall_score == 4


def test_caps_apply_before_weighting():
    scores = calculate_scores(_make_profile(skills=1000))
    assert scores.skills_score == 100
    # 100 * 0.30 + 30 * 0.10
    assert scores.overall_score == 33


def test_category_clamps():
    for n in range(0, 12):
        scores = calculate_scores(
            _make_profile(skills=n, projects=n, internships=n, certifications=n)
        )
        assert scores.skills_score == min(15 * n, 100)
        assert scores.projects_score == min(25 * n, 100)
        assert scores.internships_score == min(50 * n, 100)
        assert scores.certifications_score == min(35 * n, 100)


def test_all_scores_in_range():
    for n in (0, 1, 2, 3, 5, 8, 50):
        for education in ("", "BSc"):
            scores = calculate_scores(
                _make_profile(skills=n, projects=n, internships=n, certifications=n,
                              interests=n, education=education)
            )
            for value in scores.to_dict().values():
                assert 0 <= value <= 100


def test_overall_monotonic_in_each_category():
    for field in ("skills", "projects", "internships", "certifications"):
        previous = -1
        for n in range(0, 10):
            overall = calculate_scores(_make_profile(**{field: n}, education="BSc")).overall_score
            assert overall >= previous, f"{field} count {n} decreased overall score"
            previous = overall


def test_idempotent_and_does_not_mutate():
    profile = _make_profile(skills=4, projects=1, interests=2, education="BSc")
    before = profile.detected_metrics.to_dict()
    first = calculate_scores(profile)
    second = calculate_scores(profile)
    assert first == second
    assert profile.detected_metrics.to_dict() == before


def test_duplicates_are_counted():
    profile = UserProfile(detected_metrics=DetectedMetrics(skills=["python", "python"]))
    assert calculate_scores(profile).skills_score == 30


def test_malformed_collections_count_as_empty():
    metrics = DetectedMetrics()
    metrics.skills = None
    metrics.projects = "not a list"
    metrics.interests = 42
    profile = UserProfile(education=None, detected_metrics=metrics)
    scores = calculate_scores(profile)
    assert scores.skills_score == 0
    assert scores.projects_score == 0
    assert scores.overall_score == 0


def test_tuples_are_accepted():
    metrics = DetectedMetrics(projects=("a", "b"))
    assert calculate_scores(UserProfile(detected_metrics=metrics)).projects_score == 50

from growthsim.ingest.entities import (
    KeywordMetricsExtractor,
    extract_metrics_from_text,
    extract_sections,
    extract_skills,
)
from growthsim.models.profile import InputSource, UserProfile

SAMPLE_CV = """Jane Doe
Education: BSc Computer Science
Skills: Python, SQL, React
Projects:
- Weather Dashboard: built with React and a public API
- Budget Tracker
Experience:
- Data Analyst Intern, Acme Corp
- Barista, Corner Cafe
Certifications:
- AWS Certified Cloud Practitioner
Interests: machine learning, chess
"""


def test_extract_skills_basic():
    skills = extract_skills("Experienced in Python, JavaScript and React. Used Django with PostgreSQL.")
    assert "python" in skills
    assert "javascript" in skills
    assert "react" in skills
    assert "django" in skills
    assert "postgresql" in skills
    assert "java" not in skills


def test_extract_skills_multiword_and_symbols():
    skills = extract_skills("Built machine learning models with scikit-learn, C++ and C#.")
    assert "machine learning" in skills
    assert "scikit-learn" in skills
    assert "c++" in skills
    assert "c#" in skills


def test_extract_sections():
    sections = extract_sections(SAMPLE_CV)
    assert sections["projects"] == ["Weather Dashboard", "Budget Tracker"]
    assert sections["certifications"] == ["AWS Certified Cloud Practitioner"]
    assert sections["interests"] == ["machine learning", "chess"]
    assert sections["skills"] == ["Python", "SQL", "React"]


def test_sentence_starting_with_heading_word_is_not_a_heading():
    sections = extract_sections("Experience building REST APIs\n- Something unrelated")
    assert sections["internships"] == []


def test_extract_metrics_from_text():
    metrics = extract_metrics_from_text(SAMPLE_CV)
    assert "python" in metrics.skills
    assert "machine learning" in metrics.skills
    assert metrics.skills.count("python") == 1
    assert metrics.projects == ["Weather Dashboard", "Budget Tracker"]
    assert metrics.internships == ["Data Analyst Intern, Acme Corp"]
    assert metrics.certifications == ["AWS Certified Cloud Practitioner"]
    assert metrics.interests == ["machine learning", "chess"]


def test_extract_metrics_empty_text():
    metrics = extract_metrics_from_text("")
    assert metrics.skills == []
    assert metrics.projects == []


def test_keyword_extractor_reads_all_sources():
    profile = UserProfile(input_sources=[
        InputSource(type="text", label="cv", content="Projects:\n- Chess engine"),
        InputSource(type="text", label="notes", content="Interests: robotics"),
    ])
    metrics = KeywordMetricsExtractor().extract_metrics(profile)
    assert metrics.projects == ["Chess engine"]
    assert metrics.interests == ["robotics"]

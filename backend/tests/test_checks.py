"""Unit tests for the individual entries of the check catalog."""

from datetime import datetime

import pytest

from services.ats.checks import CHECK_CATALOG, CheckContext, get_check, run_checks
from services.ats.keyword_matcher import analyze
from services.ats.section_extractor import extract

NOW = datetime(2024, 1, 15)


def _ctx(resume, job_description=None):
    extracted = extract(resume, now=NOW)
    analysis = analyze(job_description, extracted, resume) if job_description else None
    return CheckContext(
        resume=resume,
        extracted=extracted,
        job_description=job_description,
        keyword_analysis=analysis,
    )


def _evaluate(check_id, resume, job_description=None):
    return get_check(check_id).evaluate(_ctx(resume, job_description))


def _work(*highlights, **fields):
    return [{"company": "Acme", "position": "Engineer", **fields, "highlights": list(highlights)}]


class TestCatalog:
    def test_order_and_maxima(self):
        assert [(c.check_id, c.max_score) for c in CHECK_CATALOG] == [
            ("contact-info", 10),
            ("summary-quality", 10),
            ("action-verbs", 25),
            ("quantifiable-results", 20),
            ("cliches", 15),
            ("consistency", 10),
            ("skills-section", 10),
            ("keyword-match", 20),
            ("parsing-standard-sections", 5),
            ("layout-ats-risk", 10),
            ("date-consistency", 10),
            ("metric-density", 10),
            ("redundancy", 10),
            ("tense-consistency", 10),
            ("sentence-clarity", 20),
            ("active-voice", 15),
            ("concise-language", 15),
            ("bullet-density", 10),
        ]

    def test_unknown_check(self):
        with pytest.raises(ValueError):
            get_check("spelling")

    def test_keyword_match_skipped_without_job_description(self, strong_resume):
        ids = [outcome.id for _, outcome in run_checks(_ctx(strong_resume))]
        assert "keyword-match" not in ids
        assert len(ids) == 17

    def test_scores_within_bounds(self, weak_resume, strong_resume):
        for resume in (weak_resume, strong_resume):
            for _, outcome in run_checks(_ctx(resume, "Python engineer")):
                assert 0 <= outcome.score <= outcome.max_score


class TestContactInfo:
    def test_complete(self, make_resume):
        check = _evaluate("contact-info", make_resume())
        assert check.passed
        assert check.score == 10
        assert check.details == []

    def test_missing_phone_only(self, make_resume):
        resume = make_resume(basics={
            "email": "jane@example.com",
            "location": {"city": "Berlin"},
        })
        check = _evaluate("contact-info", resume)
        assert not check.passed
        assert check.score == 7
        assert check.details == ["Missing phone"]

    def test_country_counts_as_location(self, make_resume):
        resume = make_resume(basics={
            "email": "jane@example.com",
            "phone": "555",
            "location": {"country": "Germany"},
        })
        assert _evaluate("contact-info", resume).passed


class TestSummaryQuality:
    @pytest.mark.parametrize("length,score", [(0, 0), (100, 5), (150, 5), (151, 10), (599, 10), (600, 5)])
    def test_length_bands(self, make_resume, length, score):
        resume = make_resume(basics={"summary": "x" * length})
        check = _evaluate("summary-quality", resume)
        assert check.score == score
        assert check.passed == (score == 10)


class TestActionVerbs:
    def test_two_of_three_strong_openers_pass(self, make_resume):
        resume = make_resume(work=_work("Developed X.", "Spearheaded Y.", "Responsible for Z."))
        check = _evaluate("action-verbs", resume)
        assert check.passed
        assert check.score == 25
        assert check.details is None

    def test_weak_openers_listed(self, make_resume):
        resume = make_resume(work=_work(
            "Responsible for the quarterly reporting process",
            "Helped customers",
            "Built APIs.",
        ))
        check = _evaluate("action-verbs", resume)
        assert not check.passed
        assert check.score == 15
        assert check.details == [
            'Weak openers found: "Responsible for the quarterly ...", "Helped customers..."'
        ]

    def test_no_bullets(self, make_resume):
        check = _evaluate("action-verbs", make_resume())
        assert not check.passed
        assert check.score == 5


class TestMetrics:
    def test_job_summary_metrics_are_ignored(self, make_resume):
        resume = make_resume(work=_work(
            "Increased sales by 30%.",
            "Served 200 users daily.",
            "Wrote documentation.",
            summary="Grew revenue 50% and cut costs 20%.",
        ))
        density = _evaluate("metric-density", resume)
        assert density.details == ["Metrics per bullet: 0.67"]
        assert density.passed
        assert density.score == 10

        quantified = _evaluate("quantifiable-results", resume)
        assert quantified.score == 10
        assert not quantified.passed

    def test_three_metrics_pass(self, strong_resume):
        check = _evaluate("quantifiable-results", strong_resume)
        assert check.passed
        assert check.score == 20

    def test_density_bands(self, make_resume):
        resume = make_resume(work=_work("Cut cost by 20%.", "Wrote docs.", "Wrote tests.", "Fixed bugs."))
        check = _evaluate("metric-density", resume)
        assert check.score == 6
        assert check.details == ["Metrics per bullet: 0.25"]

    def test_non_ascii_digits_are_not_metrics(self, make_resume):
        resume = make_resume(work=_work("Grew sales ٣٠%", "Cut cost ٥٠%", "Added ١٢ users"))
        quantified = _evaluate("quantifiable-results", resume)
        assert quantified.score == 0
        assert not quantified.passed
        assert _evaluate("metric-density", resume).details == ["Metrics per bullet: 0.00"]


class TestCliches:
    def test_found_cliches_listed(self, make_resume):
        resume = make_resume(basics={
            "summary": "Hard worker with a proven track record in retail.",
        })
        check = _evaluate("cliches", resume)
        assert not check.passed
        assert check.score == 9
        assert check.details == ["hard worker", "proven track record"]
        assert "hard worker, proven track record" in check.message

    def test_feedback_names_first_cliche(self, make_resume):
        resume = make_resume(basics={"summary": "Team player and hard worker."})
        check = get_check("cliches")
        outcome = check.evaluate(_ctx(resume))
        assert check.feedback(outcome) == 'Remove cliches like "hard worker" to be more specific.'

    def test_clean_text(self, strong_resume):
        check = _evaluate("cliches", strong_resume)
        assert check.passed
        assert check.score == 15


class TestConsistency:
    def test_all_periods(self, make_resume):
        assert _evaluate("consistency", make_resume(work=_work("Built A.", "Led B."))).score == 10

    def test_no_periods(self, make_resume):
        assert _evaluate("consistency", make_resume(work=_work("Built A", "Led B"))).passed

    def test_mixed(self, make_resume):
        check = _evaluate("consistency", make_resume(work=_work("Built A.", "Led B")))
        assert not check.passed
        assert check.score == 5

    def test_no_bullets(self, make_resume):
        check = _evaluate("consistency", make_resume())
        assert not check.passed
        assert check.score == 5


class TestSkillsSection:
    def test_keywords_count(self, make_resume):
        resume = make_resume(skills=[{"name": "Python", "keywords": ["Django", "Flask", "FastAPI", "Celery"]}])
        assert _evaluate("skills-section", resume).score == 10

    def test_thin(self, make_resume):
        resume = make_resume(skills=[{"name": "Python"}])
        check = _evaluate("skills-section", resume)
        assert not check.passed
        assert get_check("skills-section").fix_for(check).id == "fix-skills"


class TestKeywordMatch:
    def test_full_match(self, make_resume):
        resume = make_resume(skills=[{"name": "Python", "keywords": ["Django"]}])
        check = _evaluate("keyword-match", resume, "Python Django")
        assert check.passed
        assert check.score == 20
        assert check.details == [
            "Matched: 3/3 key terms.",
            "No major skill gaps.",
            "Responsibilities alignment looks good.",
        ]

    def test_no_match(self, make_resume):
        check = _evaluate("keyword-match", make_resume(), "Kubernetes Terraform")
        assert not check.passed
        assert check.score == 0
        assert check.details[0] == "Matched: 0/3 key terms."


class TestStandardSections:
    def test_present(self, strong_resume):
        assert _evaluate("parsing-standard-sections", strong_resume).score == 5

    def test_missing_education(self, weak_resume):
        check = _evaluate("parsing-standard-sections", weak_resume)
        assert not check.passed
        assert check.score == 0


class TestLayoutRisk:
    def test_default_layout_is_safe(self, make_resume):
        check = _evaluate("layout-ats-risk", make_resume())
        assert check.passed
        assert check.details == []

    def test_columns_and_photo(self, make_resume):
        resume = make_resume(
            meta={"layoutSettings": {"columnCount": 2}},
            basics={"image": "data:image/png;base64,AAAA"},
        )
        check = _evaluate("layout-ats-risk", resume)
        assert check.score == 6
        assert check.details == ["Multi-column layout detected.", "Profile photo detected."]

    def test_score_floor(self, make_resume):
        resume = make_resume(
            meta={"layoutSettings": {
                "columnCount": 2,
                "headerPosition": "left",
                "sectionHeadingIcons": "outline",
            }},
            basics={"image": "photo.png"},
        )
        assert _evaluate("layout-ats-risk", resume).score == 3


class TestDateConsistency:
    def test_valid_dates(self, strong_resume):
        assert _evaluate("date-consistency", strong_resume).passed

    def test_invalid_dates_listed(self, make_resume):
        resume = make_resume(
            work=_work("Built A.", startDate="Jan 2020", endDate="Present"),
            education=[{"institution": "MIT", "startDate": "2015", "endDate": "2019/06"}],
        )
        check = _evaluate("date-consistency", resume)
        assert not check.passed
        assert check.score == 4
        assert check.details == [
            "Acme: start date format",
            "Acme: end date format",
            "MIT: end date format",
        ]

    @pytest.mark.parametrize("start,end", [("2020\n", "2021-01\n"), ("２０２０", "２０２１")])
    def test_trailing_newline_and_non_ascii_digits_rejected(self, make_resume, start, end):
        resume = make_resume(work=_work("Built A.", startDate=start, endDate=end))
        check = _evaluate("date-consistency", resume)
        assert not check.passed
        assert check.score == 4
        assert check.details == ["Acme: start date format", "Acme: end date format"]


class TestRedundancy:
    def test_repeated_bullets(self, make_resume):
        resume = make_resume(work=_work("Built APIs.", "Built APIs.", "Built APIs."))
        check = _evaluate("redundancy", resume)
        assert not check.passed
        assert check.score == 5
        assert check.details == ["Approx redundancy: 67%"]

    def test_no_bullets(self, make_resume):
        check = _evaluate("redundancy", make_resume())
        assert check.passed
        assert check.details is None


class TestTenseConsistency:
    def test_consistent_past(self, strong_resume):
        assert _evaluate("tense-consistency", strong_resume).passed

    def test_contradicting_jobs(self, make_resume):
        resume = make_resume(work=[
            {"company": "A", "highlights": ["Led the platform team."]},
            {"company": "B", "highlights": ["Manage the support rota."]},
        ])
        check = _evaluate("tense-consistency", resume)
        assert not check.passed
        assert check.score == 5

    def test_mixed_job_does_not_contradict(self, make_resume):
        resume = make_resume(work=[
            {"company": "A", "highlights": ["Led the platform team."]},
            {"company": "B", "highlights": ["Built tools and manage releases."]},
        ])
        assert _evaluate("tense-consistency", resume).passed


class TestReadability:
    def test_strong_resume_is_readable(self, strong_resume):
        ctx = _ctx(strong_resume)
        for check_id in ("sentence-clarity", "active-voice", "concise-language", "bullet-density"):
            outcome = get_check(check_id).evaluate(ctx)
            assert outcome.passed, check_id
            assert outcome.score == outcome.max_score

    def test_long_sentences(self, make_resume):
        long_sentence = " ".join(["word"] * 35) + "."
        resume = make_resume(basics={"summary": long_sentence})
        check = _evaluate("sentence-clarity", resume)
        assert not check.passed
        assert check.score == 12
        assert check.details == ["Avg sentence length: 35.0 words"]

    def test_empty_text_is_not_clear(self, make_resume):
        check = _evaluate("sentence-clarity", make_resume())
        assert not check.passed
        assert check.details is None

    def test_passive_voice(self, make_resume):
        resume = make_resume(basics={"summary": "The system was designed by me. Reports were generated daily."})
        check = _evaluate("active-voice", resume)
        assert not check.passed
        assert check.score == 8
        assert check.details == ["Passive voice in 100% of sentences."]

    def test_filler_words(self, make_resume):
        resume = make_resume(basics={"summary": "I really just basically built things."})
        check = _evaluate("concise-language", resume)
        assert not check.passed
        assert check.score == 8
        assert check.details == ["Filler word count: 3"]

    def test_bullet_density(self, weak_resume):
        check = _evaluate("bullet-density", weak_resume)
        assert not check.passed
        assert check.score == 4
        assert check.details == ["Total bullets: 2"]

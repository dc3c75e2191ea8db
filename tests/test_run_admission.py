import pytest

from admission.application.use_cases.run_admission import RunAdmissionUseCase
from admission.domain.errors import ApplicantRecordError, UnknownDepartmentError
from admission.infrastructure.db.repositories.admission_repository import AdmissionRepository

APPLICANTS = (
    "Ann Smith 90 60 80 70 0 Physics Mathematics Engineering\n"
    "Ben Stone 70 95 60 50 0 Chemistry Biotech Physics\n"
    "Cid Moss 85 85 85 85 0 Physics Chemistry Mathematics\n"
    "Dee Fox 40 40 99,5 40 0 Mathematics Physics Engineering\n"
)


def test_execute_end_to_end(tmp_path, admission_settings, session):
    (tmp_path / "applicants.txt").write_text(APPLICANTS, encoding="utf-8")
    repo = AdmissionRepository(session)

    use_case = RunAdmissionUseCase(repo=repo, config=admission_settings)
    results = use_case.execute(capacity_limit=1)

    admitted = {r.name: [a.name for a in r.admitted] for r in results}
    assert admitted == {
        "Biotech": [],
        "Chemistry": ["Ben Stone"],
        "Engineering": [],
        "Mathematics": ["Dee Fox"],
        "Physics": ["Ann Smith"],
    }
    # Cid слабее Ann по физике, а Chemistry и Mathematics заняты первыми приоритетами
    assert [a.name for a in use_case.engine.unassigned()] == ["Cid Moss"]

    assert (tmp_path / "physics.txt").read_text(encoding="utf-8") == "Ann Smith 85.0\n\n"
    assert (tmp_path / "mathematics.txt").read_text(encoding="utf-8") == "Dee Fox 99.5\n\n"
    assert [a.name for a in repo.get_results_by_department("Chemistry")] == ["Ben Stone"]


def test_execute_with_given_applicants_skips_file(admission_settings, make_applicant, tmp_path):
    admission_settings.save_result_files = False
    use_case = RunAdmissionUseCase(config=admission_settings)
    results = use_case.execute(
        capacity_limit=2,
        applicants=[make_applicant("Ann Smith", ["Biotech"], chemistry=70, physics=80)],
    )
    biotech = next(r for r in results if r.name == "Biotech")
    assert [(a.name, a.score) for a in biotech.admitted] == [("Ann Smith", 75.0)]
    assert not list(tmp_path.glob("*.txt"))


def test_malformed_record_aborts_before_output(tmp_path, admission_settings):
    (tmp_path / "applicants.txt").write_text(APPLICANTS + "Eve Broken 1 2 x 4 5 Physics\n", encoding="utf-8")
    with pytest.raises(ApplicantRecordError) as exc_info:
        RunAdmissionUseCase(config=admission_settings).execute(capacity_limit=1)
    assert exc_info.value.line_no == 5
    assert sorted(p.name for p in tmp_path.glob("*.txt")) == ["applicants.txt"]


def test_unknown_department_aborts_before_output(tmp_path, admission_settings, session):
    (tmp_path / "applicants.txt").write_text("Ann Smith 1 2 3 4 5 Physics Law\n", encoding="utf-8")
    repo = AdmissionRepository(session)
    with pytest.raises(UnknownDepartmentError):
        RunAdmissionUseCase(repo=repo, config=admission_settings).execute(capacity_limit=1)
    assert sorted(p.name for p in tmp_path.glob("*.txt")) == ["applicants.txt"]
    assert repo.get_all_summaries() == []

"""
Validation tests for application request schemas.
"""

import pytest
from pydantic import ValidationError

from app.modules.applications.schemas import InterviewScores, RejectRequest


class TestInterviewScores:
    def test_total(self):
        scores = InterviewScores(
            technical_knowledge=30,
            communication_skills=25,
            problem_solving=25,
            leadership_potential=20,
        )
        assert scores.total == 100

    @pytest.mark.parametrize(
        "field,value",
        [
            ("technical_knowledge", 31),
            ("communication_skills", 26),
            ("problem_solving", 26),
            ("leadership_potential", 21),
            ("technical_knowledge", -1),
        ],
    )
    def test_sub_score_limits(self, field, value):
        values = {
            "technical_knowledge": 10,
            "communication_skills": 10,
            "problem_solving": 10,
            "leadership_potential": 10,
        }
        values[field] = value

        with pytest.raises(ValidationError):
            InterviewScores(**values)


class TestRejectRequest:
    def test_remarks_are_stripped(self):
        assert RejectRequest(remarks="  Incomplete documents ").remarks == "Incomplete documents"

    @pytest.mark.parametrize("remarks", ["", "   "])
    def test_blank_remarks_rejected(self, remarks):
        with pytest.raises(ValidationError):
            RejectRequest(remarks=remarks)

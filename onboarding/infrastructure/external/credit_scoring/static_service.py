"""Fixed-answer credit scoring (ICreditScoringService) for local runs and demos."""

from datetime import date


class StaticCreditScoringService:
    """Returns the same credit limit for every applicant."""

    def __init__(self, credit_limit: int) -> None:
        self.credit_limit = credit_limit

    async def score_credit(
        self,
        first_name: str,
        surname: str,
        date_of_birth: date,
    ) -> int:
        return self.credit_limit

"""User onboarding service: eligibility rules, client-tier credit policy, persistence ports."""

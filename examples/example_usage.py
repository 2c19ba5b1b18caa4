"""Example: drive the claim lifecycle through the service layer (no Flask).

Controllers are a thin layer; the rules live in ClaimService / ReportingService.
Assumes the demo seed (scripts/seed_db.py) has been applied.
"""

import importlib

from config import get_settings_module

from src.claim_system.claim_system.container import build_container

LECTURER_ID = 1
COORDINATOR_ID = 2
HR_ID = 4


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, upload_dir=settings.UPLOAD_DIR)
    claims = container.claim_service

    claim = claims.submit(actor_id=LECTURER_ID, hours_worked="12.5", hourly_rate="350", notes="Week 1-2 tutorials")
    claims.approve(actor_id=COORDINATOR_ID, claim_id=claim.claim_id)
    claims.mark_paid(actor_id=HR_ID, claim_id=claim.claim_id)

    report = container.reporting_service.generate_report(actor_id=HR_ID)
    for row in report.rows:
        print(row.period, row.total_claims, row.total_amount, row.approved_count, row.paid_count)


if __name__ == "__main__":
    main()

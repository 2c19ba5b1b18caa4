from __future__ import annotations

from flask import Flask, g, jsonify

from ..claims.controller import claim_to_dict
from ..common.http import login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    auth_required = login_required(container.auth_provider)
    service = container.reporting_service

    @app.route("/hr/approved", methods=["GET"], endpoint="hr_approved")
    @auth_required
    def hr_approved():
        view = service.approved_view(actor_id=g.actor_id)
        return jsonify(
            {
                "claims": [claim_to_dict(c) for c in view.claims],
                "stats": {
                    "total_approved": view.total_approved,
                    "total_amount": str(view.total_amount),
                    "earliest_claim_month": view.earliest_claim_month.strftime("%Y-%m"),
                    "lecturer_count": view.lecturer_count,
                },
            }
        )

    @app.route("/hr/report", methods=["GET"], endpoint="hr_report")
    @auth_required
    def hr_report():
        report = service.generate_report(actor_id=g.actor_id)
        return jsonify(
            {
                "rows": [
                    {
                        "period": r.period,
                        "total_claims": r.total_claims,
                        "total_amount": str(r.total_amount),
                        "approved_count": r.approved_count,
                        "paid_count": r.paid_count,
                    }
                    for r in report.rows
                ],
                "totals": {
                    "total_claims": report.total_claims,
                    "total_amount": str(report.total_amount),
                    "total_approved": report.total_approved,
                    "total_paid": report.total_paid,
                },
            }
        )

    @app.route("/hr/lecturers", methods=["GET"], endpoint="hr_lecturers")
    @auth_required
    def hr_lecturers():
        rows = service.manage_lecturers(actor_id=g.actor_id)
        return jsonify(
            {
                "lecturers": [
                    {
                        "lecturer_id": r.lecturer_id,
                        "full_name": r.full_name,
                        "total_claims": r.total_claims,
                        "total_amount": str(r.total_amount),
                        "pending_count": r.pending_count,
                        "approved_count": r.approved_count,
                    }
                    for r in rows
                ]
            }
        )

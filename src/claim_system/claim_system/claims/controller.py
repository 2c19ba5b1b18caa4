from __future__ import annotations

import io

from flask import Flask, g, jsonify, request, send_file

from ..common.http import login_required
from ..container import Container
from ..documents.model import UploadedDocument
from .model import Claim


def claim_to_dict(c: Claim) -> dict:
    return {
        "claim_id": c.claim_id,
        "lecturer_id": c.lecturer_id,
        "hours_worked": str(c.hours_worked),
        "hourly_rate": str(c.hourly_rate),
        "total_amount": str(c.total_amount),
        "claim_month": c.claim_month.strftime("%Y-%m"),
        "notes": c.notes or "",
        "original_file_name": c.original_file_name,
        "has_document": c.has_document,
        "status": c.status.value,
        "submitted_at": c.submitted_at.isoformat(timespec="seconds"),
        "reviewed_at": c.reviewed_at.isoformat(timespec="seconds") if c.reviewed_at else None,
        "reviewed_by": c.reviewed_by,
        "rejection_reason": c.rejection_reason,
        "version": c.version,
    }


def register(app: Flask, container: Container) -> None:
    auth_required = login_required(container.auth_provider)
    service = container.claim_service

    @app.route("/claims", methods=["GET"], endpoint="list_claims")
    @auth_required
    def list_claims():
        claims = service.list_for_actor(actor_id=g.actor_id)
        return jsonify({"claims": [claim_to_dict(c) for c in claims]})

    @app.route("/claims", methods=["POST"], endpoint="submit_claim")
    @auth_required
    def submit_claim():
        document = None
        upload = request.files.get("supporting_document")
        if upload is not None and upload.filename:
            document = UploadedDocument(content=upload.read(), filename=upload.filename)

        claim = service.submit(
            actor_id=g.actor_id,
            hours_worked=request.form.get("hours_worked"),
            hourly_rate=request.form.get("hourly_rate"),
            claim_month=request.form.get("claim_month"),
            notes=request.form.get("notes"),
            document=document,
        )
        return jsonify(claim_to_dict(claim)), 201

    @app.route("/claims/<int:claim_id>", methods=["GET"], endpoint="claim_details")
    @auth_required
    def claim_details(claim_id: int):
        claim = service.get_visible(actor_id=g.actor_id, claim_id=claim_id)
        return jsonify(claim_to_dict(claim))

    @app.route("/claims/<int:claim_id>/review", methods=["POST"], endpoint="review_claim")
    @auth_required
    def review_claim(claim_id: int):
        claim = service.review(
            actor_id=g.actor_id,
            claim_id=claim_id,
            decision=request.form.get("decision", ""),
            rejection_reason=request.form.get("rejection_reason"),
        )
        return jsonify(claim_to_dict(claim))

    @app.route("/claims/<int:claim_id>/paid", methods=["POST"], endpoint="mark_claim_paid")
    @auth_required
    def mark_claim_paid(claim_id: int):
        claim = service.mark_paid(actor_id=g.actor_id, claim_id=claim_id)
        return jsonify(claim_to_dict(claim))

    @app.route("/claims/<int:claim_id>/document", methods=["GET"], endpoint="download_document")
    @auth_required
    def download_document(claim_id: int):
        doc = service.download_document(actor_id=g.actor_id, claim_id=claim_id)
        return send_file(
            io.BytesIO(doc.content),
            mimetype=doc.content_type,
            as_attachment=True,
            download_name=doc.filename,
        )

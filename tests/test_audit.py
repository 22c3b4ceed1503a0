"""Tests for audit file output: written off the request path, never fatal."""

import json

import pytest
from fastapi import Depends, FastAPI

from rbac import Principal, require_permission
from rbac.audit import configure_audit, get_audit_sample, shutdown_audit


def _reports_route(app: FastAPI) -> None:
    @app.get("/reports")
    async def reports(p: Principal = Depends(require_permission("reports:view"))):
        return {"ok": True}


@pytest.fixture
def audit_to():
    def _configure(path):
        configure_audit(path)

    yield _configure
    shutdown_audit()


class TestAuditFile:
    def test_entries_written_as_json_lines(self, tmp_path, audit_to, guard_app) -> None:
        audit_file = tmp_path / "logs" / "audit.jsonl"
        audit_to(audit_file)
        guard_app(Principal(id="h1", role="hod"), _reports_route).get("/reports")
        guard_app(Principal(id="f1", role="faculty"), _reports_route).get("/reports")
        shutdown_audit()

        lines = [json.loads(line) for line in audit_file.read_text(encoding="utf-8").splitlines()]
        assert [(e["principal_id"], e["decision"]) for e in lines] == [("h1", "allow"), ("f1", "deny")]
        assert lines[0]["required"] == ["reports:view"]

    def test_unwritable_file_does_not_change_decisions(self, tmp_path, audit_to, guard_app) -> None:
        # The path is a directory: opening it for append fails on every write
        audit_to(tmp_path)
        allowed = guard_app(Principal(id="h1", role="hod"), _reports_route).get("/reports")
        denied = guard_app(Principal(id="f1", role="faculty"), _reports_route).get("/reports")
        assert allowed.status_code == 200
        assert denied.status_code == 403
        assert len(get_audit_sample()) == 2

    def test_reconfigure_detaches_previous_file(self, tmp_path, audit_to, guard_app) -> None:
        first = tmp_path / "first.jsonl"
        audit_to(first)
        audit_to(None)
        guard_app(Principal(id="h1", role="hod"), _reports_route).get("/reports")
        assert not first.exists()

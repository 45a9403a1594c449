"""Tests for Kubernetes event utilities."""

from __future__ import annotations

from unittest.mock import patch

from s3_bucket_controller.utils.events import (
    emit_bucket_created,
    emit_bucket_deleted,
    emit_bucket_updated,
    emit_drift_detected,
    emit_event,
    emit_reconcile_failed,
    emit_reconcile_started,
    emit_validate_failed,
    emit_validate_succeeded,
)

META = {"name": "assets", "namespace": "default"}


class TestEmitEvent:
    """Test cases for emit_event function."""

    @patch("s3_bucket_controller.utils.events.kopf.event")
    def test_emit_event_normal(self, mock_event):
        """Test emitting normal event."""
        emit_event(META, "TestReason", "Test message")

        mock_event.assert_called_once_with(META, reason="TestReason", message="Test message", type="Normal")

    @patch("s3_bucket_controller.utils.events.kopf.event")
    def test_emit_event_warning(self, mock_event):
        """Test emitting warning event."""
        emit_event(META, "ErrorReason", "Error occurred", type_="Warning")

        mock_event.assert_called_once_with(META, reason="ErrorReason", message="Error occurred", type="Warning")


class TestReconcileEvents:
    """Test cases for reconciliation and validation events."""

    @patch("s3_bucket_controller.utils.events.kopf.event")
    def test_emit_reconcile_started(self, mock_event):
        """Test emitting reconcile started event."""
        emit_reconcile_started(META)

        assert mock_event.call_args.kwargs["reason"] == "ReconcileStarted"
        assert mock_event.call_args.kwargs["type"] == "Normal"

    @patch("s3_bucket_controller.utils.events.kopf.event")
    def test_emit_reconcile_failed(self, mock_event):
        """Test emitting reconcile failed event."""
        emit_reconcile_failed(META, "Reconciliation failed: AccessDenied")

        assert mock_event.call_args.kwargs["reason"] == "ReconcileFailed"
        assert mock_event.call_args.kwargs["message"] == "Reconciliation failed: AccessDenied"
        assert mock_event.call_args.kwargs["type"] == "Warning"

    @patch("s3_bucket_controller.utils.events.kopf.event")
    def test_emit_validate_events(self, mock_event):
        """Test emitting validation events."""
        emit_validate_succeeded(META)
        emit_validate_failed(META, "bucket is required")

        reasons = [call.kwargs["reason"] for call in mock_event.call_args_list]
        assert reasons == ["ValidateSucceeded", "ValidateFailed"]
        assert mock_event.call_args.kwargs["type"] == "Warning"


class TestBucketEvents:
    """Test cases for bucket lifecycle events."""

    @patch("s3_bucket_controller.utils.events.kopf.event")
    def test_emit_bucket_lifecycle(self, mock_event):
        """Test that lifecycle events name the bucket."""
        emit_bucket_created(META, "b1")
        emit_bucket_updated(META, "b1")
        emit_bucket_deleted(META, "b1")

        messages = [call.kwargs["message"] for call in mock_event.call_args_list]
        assert messages == ["Bucket b1 created", "Bucket b1 updated", "Bucket b1 deleted"]
        assert all(call.kwargs["type"] == "Normal" for call in mock_event.call_args_list)

    @patch("s3_bucket_controller.utils.events.kopf.event")
    def test_emit_drift_detected(self, mock_event):
        """Test that drift is reported as a warning."""
        emit_drift_detected(META, "b1")

        assert mock_event.call_args.kwargs["reason"] == "DriftDetected"
        assert "b1" in mock_event.call_args.kwargs["message"]
        assert mock_event.call_args.kwargs["type"] == "Warning"

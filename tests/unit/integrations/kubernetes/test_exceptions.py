"""Unit tests for Kubernetes exceptions."""

from __future__ import annotations

import pytest

from kube_inventory.integrations.kubernetes.exceptions import (
    KubernetesAuthError,
    KubernetesConflictError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
    KubernetesTimeoutError,
    KubernetesValidationError,
)


@pytest.mark.unit
@pytest.mark.kubernetes
class TestKubernetesError:
    """Test KubernetesError base exception."""

    def test_init_minimal(self) -> None:
        error = KubernetesError("Something went wrong")
        assert error.message == "Something went wrong"
        assert error.status_code is None
        assert error.resource_type is None
        assert str(error) == "Something went wrong"

    def test_str_with_status(self) -> None:
        assert str(KubernetesError("API error", status_code=500)) == "API error (status: 500)"

    def test_str_with_location(self) -> None:
        error = KubernetesError(
            "Forbidden",
            status_code=403,
            resource_type="Pod",
            resource_name="web-0",
            namespace="prod",
        )
        assert str(error) == "Forbidden (status: 403) [Pod/web-0 in prod]"

    def test_str_with_kind_and_namespace_only(self) -> None:
        error = KubernetesError("Forbidden", resource_type="Secret", namespace="kube-system")
        assert str(error) == "Forbidden [Secret in kube-system]"


@pytest.mark.unit
@pytest.mark.kubernetes
class TestSubclasses:
    """Test the status-specific subclasses."""

    @pytest.mark.parametrize(
        "cls",
        [
            KubernetesAuthError,
            KubernetesConflictError,
            KubernetesConnectionError,
            KubernetesNotFoundError,
            KubernetesTimeoutError,
            KubernetesValidationError,
        ],
    )
    def test_all_are_kubernetes_errors(self, cls: type[KubernetesError]) -> None:
        assert issubclass(cls, KubernetesError)

    def test_connection_error_keeps_cause(self) -> None:
        cause = OSError("refused")
        error = KubernetesConnectionError("Cannot connect", original_error=cause)
        assert error.original_error is cause
        assert error.status_code is None

    def test_auth_error_defaults(self) -> None:
        error = KubernetesAuthError(reason="Unauthorized")
        assert error.status_code == 401
        assert error.reason == "Unauthorized"

    def test_not_found_message_from_resource(self) -> None:
        error = KubernetesNotFoundError(
            resource_type="Deployment", resource_name="web", namespace="prod"
        )
        assert error.message == "Deployment 'web' not found in namespace 'prod'"
        assert error.status_code == 404

    def test_not_found_default_message(self) -> None:
        assert KubernetesNotFoundError().message == "Kubernetes resource not found"

    def test_conflict_status(self) -> None:
        assert KubernetesConflictError().status_code == 409

    def test_validation_status(self) -> None:
        assert KubernetesValidationError().status_code == 422
        assert KubernetesValidationError(status_code=400).status_code == 400

    def test_timeout_status(self) -> None:
        assert KubernetesTimeoutError(status_code=504).status_code == 504

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

import pytest

from dualstore.adapters.declarative import DeclarativeOrganizationUnitStore
from dualstore.domain import OrganizationUnitService
from dualstore.ui import cli
from tests.helpers.organization_units import make_unit

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def declarative_service(monkeypatch: pytest.MonkeyPatch) -> OrganizationUnitService:
    store = DeclarativeOrganizationUnitStore(
        [
            make_unit("Engineering", handle="eng"),
            make_unit("Platform", parent="ou-engineering"),
            make_unit("Sales"),
        ]
    )
    service = OrganizationUnitService(store, declarative=store)

    @contextmanager
    def fake_service() -> Iterator[OrganizationUnitService]:
        yield service

    monkeypatch.setattr(cli, "organization_unit_service", fake_service)
    return service


@pytest.mark.usefixtures("declarative_service")
def test_cli_lists_root_units(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO):
        cli.main(["ou", "list", "--limit", "1", "--offset", "1"])

    assert "Showing 1 of 2 organization units (offset 1)" in caplog.text
    assert "ou-sales" in caplog.text
    assert "ou-engineering" not in caplog.text


@pytest.mark.usefixtures("declarative_service")
def test_cli_gets_unit_by_path(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO):
        cli.main(["ou", "get", "--path", "eng/platform"])

    assert "ou-platform handle=platform" in caplog.text
    assert "read_only=True" in caplog.text


@pytest.mark.usefixtures("declarative_service")
def test_cli_counts_root_units(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO):
        cli.main(["ou", "count"])

    assert "Root organization units: 2" in caplog.text


@pytest.mark.usefixtures("declarative_service")
@pytest.mark.parametrize(
    "argv",
    [
        ["ou", "get"],
        ["ou", "get", "ou-sales", "--path", "sales"],
        ["ou", "list", "--limit", "-5"],
        ["ou", "children", "ou-engineering", "--offset", "-1"],
    ],
)
def test_cli_validation_errors_exit_with_usage_code(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv)

    assert excinfo.value.code == 2


@pytest.mark.usefixtures("declarative_service")
def test_cli_write_to_declarative_store_fails(caplog: pytest.LogCaptureFixture) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["ou", "create", "--handle", "support", "--name", "Support"])

    assert excinfo.value.code == 1
    assert "Fatal error during ou create" in caplog.text


@pytest.mark.usefixtures("declarative_service")
def test_cli_missing_unit_fails(caplog: pytest.LogCaptureFixture) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["ou", "delete", "ou-missing"])

    assert excinfo.value.code == 1
    assert "organization unit not found: ou-missing" in caplog.text


@pytest.mark.usefixtures("declarative_service")
def test_cli_service_validation_error_exits_with_usage_code(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["ou", "get", "--path", "/"])

    assert excinfo.value.code == 2
    assert "Invalid request for ou get" in caplog.text

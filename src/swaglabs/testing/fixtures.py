"""Fixture provider for the SwagLabs E2E suite.

This pytest plugin provides:
- Settings and the read-only test data, once per session
- One page object bundle per test, inside that test's own browser context
- Extra isolated sessions for multi-user scenarios
- Login parametrization from the test data
- Shard selection and the run reporter

Register it from the root conftest:
    pytest_plugins = ["swaglabs.testing.fixtures"]

Usage:
    @pytest.mark.e2e
    def test_login(pages, test_data):
        pages.login.open()
        pages.login.login_as(test_data.user("standard"))
        pages.products.wait_until_displayed()

    @pytest.mark.e2e
    def test_every_rejected_user(pages, test_data, rejected_user_key):
        ...
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any

import pytest
import structlog
from playwright.sync_api import BrowserContext, Page
from pydantic import ValidationError

from swaglabs.config.logging import configure_logging
from swaglabs.config.settings import Settings
from swaglabs.core.exceptions import ConfigurationError
from swaglabs.core.steps import StepRecorder
from swaglabs.core.waits import Deadline
from swaglabs.data.models import LoginOutcome, TestData
from swaglabs.data.store import load_test_data
from swaglabs.pages.bundle import PageBundle, build_page_bundle
from swaglabs.testing.preflight import check_target_reachable
from swaglabs.testing.reporter import PLUGIN_NAME, STEPS_ATTR, RunReporter, steps_to_report
from swaglabs.testing.sharding import parse_shard, split_for_shard

log = structlog.get_logger(__name__)

_settings_key = pytest.StashKey[Settings]()
_test_data_key = pytest.StashKey[TestData]()
_recorder_key = pytest.StashKey[StepRecorder]()
_reported_steps_key = pytest.StashKey[int]()

# Parametrized fixture name -> users whose login has that outcome
USER_KEY_FIXTURES: dict[str, LoginOutcome] = {
    "accepted_user_key": LoginOutcome.SUCCESS,
    "locked_out_user_key": LoginOutcome.LOCKED_OUT,
    "rejected_user_key": LoginOutcome.VALIDATION_ERROR,
}


def run_settings(config: pytest.Config) -> Settings:
    """Settings of this run, built once in pytest_configure."""
    return config.stash[_settings_key]


def run_test_data(config: pytest.Config) -> TestData:
    """Test data of this run, loaded on first use and kept in the stash."""
    if _test_data_key not in config.stash:
        config.stash[_test_data_key] = load_test_data(run_settings(config).test_data_path)
    return config.stash[_test_data_key]


def _is_xdist_worker(config: pytest.Config) -> bool:
    return hasattr(config, "workerinput")


# =============================================================================
# Hooks
# =============================================================================


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("swaglabs", "SwagLabs E2E")
    group.addoption(
        "--shard",
        action="store",
        default=None,
        help="Run only shard I of N of the collected tests, e.g. --shard=3/3",
    )
    group.addoption(
        "--no-run-reporter",
        action="store_true",
        default=False,
        help="Do not log test lifecycle events",
    )
    group.addoption(
        "--skip-preflight",
        action="store_true",
        default=False,
        help="Do not check that the application under test is reachable",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "e2e: browser test against the running shop")
    config.addinivalue_line("markers", "smoke: quick subset of the e2e tests")
    config.addinivalue_line("markers", "unit: browser-free test")

    try:
        settings = Settings()
    except ValidationError as e:
        raise pytest.UsageError(f"Invalid SWAGLABS_* settings: {e}") from e
    config.stash[_settings_key] = settings
    configure_logging(settings)

    shard = config.getoption("--shard")
    if shard:
        try:
            parse_shard(shard)
        except ConfigurationError as e:
            raise pytest.UsageError(str(e)) from e

    # xdist workers forward their reports to the main process
    if not config.getoption("--no-run-reporter") and not _is_xdist_worker(config):
        config.pluginmanager.register(RunReporter(), PLUGIN_NAME)


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Parametrize ``*_user_key`` arguments with the matching users."""
    for name, outcome in USER_KEY_FIXTURES.items():
        if name in metafunc.fixturenames:
            data = run_test_data(metafunc.config)
            metafunc.parametrize(name, sorted(data.users_with_outcome(outcome)))


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    value = config.getoption("--shard")
    if not value:
        return
    shard = parse_shard(value)
    selected, deselected = split_for_shard(items, shard, key=lambda item: item.nodeid)
    if deselected:
        config.hook.pytest_deselected(items=deselected)
    items[:] = selected
    log.info("shard_selected", shard=str(shard), selected=len(selected), deselected=len(deselected))


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo[None]):
    """Attach the steps finished during this phase to its report."""
    outcome = yield
    report = outcome.get_result()

    recorder = item.stash.get(_recorder_key, None)
    if recorder is None:
        return
    already = item.stash.get(_reported_steps_key, 0)
    setattr(report, STEPS_ATTR, steps_to_report(recorder.records[already:]))
    item.stash[_reported_steps_key] = len(recorder.records)


# =============================================================================
# Session fixtures
# =============================================================================


@pytest.fixture(scope="session")
def swaglabs_settings(pytestconfig: pytest.Config) -> Settings:
    """Settings built once in pytest_configure."""
    return run_settings(pytestconfig)


@pytest.fixture(scope="session")
def test_data(pytestconfig: pytest.Config) -> TestData:
    """Static test data, loaded once and shared read-only."""
    return run_test_data(pytestconfig)


@pytest.fixture(scope="session")
def target_reachable(pytestconfig: pytest.Config, swaglabs_settings: Settings) -> bool:
    """Check once per session that the shop answers."""
    if pytestconfig.getoption("--skip-preflight"):
        return True
    check_target_reachable(swaglabs_settings.base_url)
    return True


@pytest.fixture(scope="session")
def launched_headless(
    browser_type_launch_args: dict[str, Any], swaglabs_settings: Settings
) -> bool:
    """Whether browsers really run headless, after --headed and overrides."""
    return bool(browser_type_launch_args.get("headless", swaglabs_settings.headless))


# =============================================================================
# Per-test fixtures
# =============================================================================


@pytest.fixture
def test_budget(swaglabs_settings: Settings) -> Deadline:
    """Time budget shared by every wait of the current test."""
    return Deadline(swaglabs_settings.default_timeout_seconds)


@pytest.fixture
def step_recorder(request: pytest.FixtureRequest) -> StepRecorder:
    """Step recorder of the current test; its steps go out on the reports."""
    recorder = StepRecorder(request.node.nodeid)
    request.node.stash[_recorder_key] = recorder
    return recorder


@pytest.fixture
def pages(
    target_reachable: bool,
    page: Page,
    swaglabs_settings: Settings,
    launched_headless: bool,
    test_budget: Deadline,
    step_recorder: StepRecorder,
) -> PageBundle:
    """Every page object, bound to this test's isolated browser page.

    pytest-playwright owns the context: it is closed, and its trace, video
    and screenshot kept on failure, after every test.
    """
    return build_page_bundle(
        page,
        swaglabs_settings,
        deadline=test_budget,
        recorder=step_recorder,
        headless=launched_headless,
    )


@pytest.fixture
def logged_in_pages(pages: PageBundle, test_data: TestData) -> PageBundle:
    """Page bundle after a successful standard-user login."""
    pages.login.open()
    pages.login.login_as(test_data.user("standard"))
    pages.products.wait_until_displayed()
    return pages


@pytest.fixture
def session_factory(
    target_reachable: bool,
    new_context: Callable[..., BrowserContext],
    swaglabs_settings: Settings,
    launched_headless: bool,
    test_budget: Deadline,
    step_recorder: StepRecorder,
) -> Generator[Callable[[], PageBundle], None, None]:
    """Open additional isolated browser sessions within one test.

    Usage:
        def test_handoff(session_factory):
            alice = session_factory()
            bob = session_factory()

    Contexts come from pytest-playwright's ``new_context``, so they record
    the same screenshot, video and trace artifacts as the default one and
    are closed at teardown, pass or fail.
    """
    opened = 0

    def new_session() -> PageBundle:
        nonlocal opened
        context = new_context()
        opened += 1
        log.info("session_opened", sessions=opened)
        return build_page_bundle(
            context.new_page(),
            swaglabs_settings,
            deadline=test_budget,
            recorder=step_recorder,
            headless=launched_headless,
        )

    yield new_session
    log.info("sessions_released", sessions=opened)

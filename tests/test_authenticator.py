"""PlaywrightAuthenticator and selector chain tests."""

import dataclasses

import pytest
from playwright.sync_api import Error as PlaywrightError, TimeoutError as PlaywrightTimeout

from logisly_scraper.domain.exceptions import LoginFormNotFound, LoginSubmitFailed, LoginTimeout, NavigationTimeout
from logisly_scraper.domain.value_objects import SelectorStrategy
from logisly_scraper.infrastructure.scraping.authenticator import PlaywrightAuthenticator
from logisly_scraper.infrastructure.scraping.locators import find_first_visible

from .fakes import FakeElement, FakePage, FakeSession


def _login_page(**overrides) -> FakePage:
    elements = {
        'input[type="email"]': [FakeElement()],
        'input[type="password"]': [FakeElement()],
        'button[type="submit"]': [FakeElement(text="Login")],
    }
    elements.update(overrides)
    return FakePage({key: value for key, value in elements.items() if value is not None})


class TestLogin:

    def test_fills_and_submits(self, config):
        page = _login_page()
        session = FakeSession(page)

        PlaywrightAuthenticator(config).login(session, config.login_url, config.credentials)

        assert session.visited == [config.login_url]
        assert page.actions == [
            ("fill", 'input[type="email"]', "ops@example.com"),
            ("fill", 'input[type="password"]', "s3cret"),
            ("click", 'button[type="submit"]'),
        ]

    def test_email_by_name_fallback(self, config):
        page = _login_page(**{
            'input[type="email"]': None,
            'input[name="email"]': [FakeElement()],
        })
        authenticator = PlaywrightAuthenticator(config)

        authenticator.login(FakeSession(page), config.login_url, config.credentials)

        assert ("fill", 'input[name="email"]', "ops@example.com") in page.actions
        assert authenticator.strategy_log['email'] == "Input name email"

    def test_hidden_email_input_skipped(self, config):
        page = _login_page(**{
            'input[type="email"]': [FakeElement(visible=False)],
            'input[name="email"]': [FakeElement()],
        })
        PlaywrightAuthenticator(config).login(FakeSession(page), config.login_url, config.credentials)
        assert ("fill", 'input[name="email"]', "ops@example.com") in page.actions

    def test_submit_by_label_when_no_submit_type(self, config):
        page = _login_page(**{
            'button[type="submit"]': None,
            'button:has-text("Masuk")': [FakeElement(text="Masuk")],
        })
        authenticator = PlaywrightAuthenticator(config)

        authenticator.login(FakeSession(page), config.login_url, config.credentials)

        assert page.actions[-1] == ("click", 'button:has-text("Masuk")')
        assert authenticator.strategy_log['submit'] == "Masuk label"

    def test_submit_type_preferred_over_label(self, config):
        page = _login_page(**{'button:has-text("Login")': [FakeElement(text="Login")]})
        PlaywrightAuthenticator(config).login(FakeSession(page), config.login_url, config.credentials)
        assert page.actions[-1] == ("click", 'button[type="submit"]')

    def test_missing_email_field(self, config):
        page = _login_page(**{'input[type="email"]': None})
        with pytest.raises(LoginFormNotFound) as excinfo:
            PlaywrightAuthenticator(config).login(FakeSession(page), config.login_url, config.credentials)
        assert excinfo.value.field == "email"
        assert page.actions == []

    def test_missing_submit(self, config):
        page = _login_page(**{'button[type="submit"]': None})
        with pytest.raises(LoginFormNotFound) as excinfo:
            PlaywrightAuthenticator(config).login(FakeSession(page), config.login_url, config.credentials)
        assert excinfo.value.field == "submit"

    def test_no_navigation_after_submit(self, config):
        page = _login_page()
        page.navigates_on_submit = False
        with pytest.raises(LoginTimeout):
            PlaywrightAuthenticator(config).login(FakeSession(page), config.login_url, config.credentials)
        assert page.actions[-1] == ("click", 'button[type="submit"]')

    def test_login_page_timeout(self, config):
        session = FakeSession(_login_page(), timeouts=[config.login_url])
        with pytest.raises(NavigationTimeout):
            PlaywrightAuthenticator(config).login(session, config.login_url, config.credentials)


class TestFindFirstVisible:

    STRATEGIES = (
        SelectorStrategy("first", "#first"),
        SelectorStrategy("second", "#second"),
    )

    def test_first_match_wins(self):
        page = FakePage({"#first": [FakeElement()], "#second": [FakeElement()]})
        strategy, _ = find_first_visible(page, self.STRATEGIES, timeout_ms=0)
        assert strategy.name == "first"

    def test_none_when_nothing_resolves(self):
        page = FakePage()
        assert find_first_visible(page, self.STRATEGIES, timeout_ms=0) is None

    def test_waits_for_late_element(self):
        page = FakePage()

        def reveal(p):
            p.elements["#second"] = [FakeElement()]

        page.on_wait = reveal
        strategy, _ = find_first_visible(page, self.STRATEGIES, timeout_ms=10000)

        assert strategy.name == "second"
        assert len(page.waits) == 1

    def test_config_timeout_is_used(self, config):
        page = _login_page(**{'input[type="email"]': None})
        slow = dataclasses.replace(config, login_form_timeout_ms=1)
        with pytest.raises(LoginFormNotFound) as excinfo:
            PlaywrightAuthenticator(slow).login(FakeSession(page), slow.login_url, slow.credentials)
        assert excinfo.value.timeout_ms == 1


class TestSubmitClick:

    def test_click_bounded_by_submit_timeout(self, config):
        page = _login_page()
        PlaywrightAuthenticator(config).login(FakeSession(page), config.login_url, config.credentials)
        assert page.click_timeouts == [config.login_submit_timeout_ms]

    def test_intercepted_click_is_not_a_login_timeout(self, config):
        def intercepted():
            raise PlaywrightTimeout('<div class="overlay"> intercepts pointer events')

        page = _login_page(**{'button[type="submit"]': [FakeElement(text="Login", on_click=intercepted)]})

        with pytest.raises(LoginSubmitFailed) as excinfo:
            PlaywrightAuthenticator(config).login(FakeSession(page), config.login_url, config.credentials)

        assert "intercepts pointer events" in str(excinfo.value)

    def test_detached_submit_fails_login(self, config):
        def detached():
            raise PlaywrightError("Element is not attached to the DOM")

        page = _login_page(**{'button[type="submit"]': [FakeElement(on_click=detached)]})

        with pytest.raises(LoginSubmitFailed):
            PlaywrightAuthenticator(config).login(FakeSession(page), config.login_url, config.credentials)

"""
Browser management for Selenium previews
"""
import logging

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.edge.service import Service as EdgeService
from selenium.webdriver.firefox.service import Service as FirefoxService
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager
from webdriver_manager.microsoft import EdgeChromiumDriverManager

from local_preview.core.config_models import PreviewSettings, SUPPORTED_BROWSERS
from local_preview.exceptions import BrowserLaunchError, ConfigurationError

logger = logging.getLogger(__name__)

# Errors raised while fetching a driver binary or spawning the browser
_LAUNCH_ERRORS = (WebDriverException, OSError, ValueError)


class BrowserManager:
    def __init__(self, settings=None):
        self.settings = settings or PreviewSettings()

    @property
    def browser(self) -> str:
        return self.settings.browser

    def create_driver(self):
        """Start a WebDriver session for the configured browser"""
        browser = self.browser
        if browser not in SUPPORTED_BROWSERS:
            raise ConfigurationError(f"Unsupported browser: {browser}")

        options = self._build_options(browser)
        try:
            service = self._build_service(browser)
            driver = self._start(browser, service, options)
        except _LAUNCH_ERRORS as e:
            logger.error(f"Failed to start {browser} driver: {e}")
            raise BrowserLaunchError(browser, str(e)) from e

        try:
            self._configure(driver)
        except WebDriverException as e:
            logger.error(f"Failed to configure {browser} session: {e}")
            self._quit_quietly(driver)
            raise BrowserLaunchError(browser, str(e)) from e

        logger.info(f"{browser.capitalize()} browser created" + (" (headless)" if self.settings.headless else ""))
        return driver

    def _build_options(self, browser):
        if browser == "firefox":
            options = webdriver.FirefoxOptions()
            if self.settings.headless:
                options.add_argument("-headless")
            return options

        options = webdriver.EdgeOptions() if browser == "edge" else webdriver.ChromeOptions()
        options.add_argument("--disable-dev-shm-usage")
        if self.settings.headless:
            options.add_argument("--headless=new")
        dimensions = self.settings.window_dimensions()
        if dimensions:
            options.add_argument(f"--window-size={dimensions[0]},{dimensions[1]}")
        return options

    def _build_service(self, browser):
        """Explicit driver path, then webdriver-manager, then Selenium Manager"""
        service_cls = {
            "chrome": ChromeService,
            "firefox": FirefoxService,
            "edge": EdgeService,
        }[browser]

        if self.settings.driver_path:
            logger.debug(f"Using driver binary {self.settings.driver_path}")
            return service_cls(executable_path=self.settings.driver_path)

        if self.settings.use_webdriver_manager:
            if browser == "firefox":
                path = GeckoDriverManager().install()
            elif browser == "edge":
                path = EdgeChromiumDriverManager().install()
            else:
                path = ChromeDriverManager().install()
            logger.debug(f"webdriver-manager resolved {browser} driver at {path}")
            return service_cls(executable_path=path)

        logger.debug(f"Letting Selenium Manager resolve the {browser} driver")
        return service_cls()

    def _start(self, browser, service, options):
        if browser == "firefox":
            return webdriver.Firefox(service=service, options=options)
        if browser == "edge":
            return webdriver.Edge(service=service, options=options)
        return webdriver.Chrome(service=service, options=options)

    def _configure(self, driver):
        driver.set_page_load_timeout(self.settings.page_load_timeout)
        # Chromium browsers get --window-size instead
        dimensions = self.settings.window_dimensions()
        if dimensions and self.browser == "firefox":
            driver.set_window_size(*dimensions)

    @staticmethod
    def _quit_quietly(driver):
        try:
            driver.quit()
        except WebDriverException as e:
            logger.debug(f"Ignoring quit error during failed launch: {e}")

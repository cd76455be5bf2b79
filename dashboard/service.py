"""
Dashboard GUI

Flask front end over the dashboard controller: a mock login form, then four
panels (users, customers, jobs, pipelines) filled in as each fetch lands.
"""

import logging
from typing import Optional

from flask import Flask, jsonify, redirect, render_template, request, url_for

from dashboard.client import DataServiceClient
from dashboard.config import DashboardSettings
from dashboard.controller import DashboardController
from dashboard.runtime import ControllerRunner
from dashboard.views import build_panels

logger = logging.getLogger(__name__)

# Seconds between page reloads while any panel is still loading
LOADING_REFRESH_SECONDS = 2


def build_runner(settings: DashboardSettings) -> ControllerRunner:
    client = DataServiceClient(settings.api_base_url, timeout_seconds=settings.fetch_timeout_seconds)
    return ControllerRunner(DashboardController(client), call_timeout=settings.fetch_timeout_seconds)


def create_app(settings: Optional[DashboardSettings] = None, runner: Optional[ControllerRunner] = None) -> Flask:
    settings = settings or DashboardSettings.from_env()
    runner = runner or build_runner(settings)
    runner.start()

    app = Flask(__name__)
    app.secret_key = settings.secret_key
    app.config["API_BASE_URL"] = settings.api_base_url
    app.extensions["dashboard_runner"] = runner

    @app.route('/')
    def index():
        state = runner.snapshot()
        return render_template(
            'dashboard.html',
            user=state.session,
            panels=build_panels(state) if state.logged_in else [],
            refresh_seconds=LOADING_REFRESH_SECONDS if state.any_loading else None,
            api_base_url=settings.api_base_url,
        )

    @app.route('/login', methods=['POST'])
    def login():
        runner.submit_login(request.form.get('username', ''))
        return redirect(url_for('index'))

    @app.route('/logout', methods=['POST'])
    def logout():
        runner.logout()
        return redirect(url_for('index'))

    @app.route('/api/state')
    def api_state():
        return jsonify(runner.snapshot().to_dict())

    logger.info("Dashboard GUI created (backend API: %s)", settings.api_base_url)
    return app

"""Resolved locale code of the current request."""

from flask import current_app, g, has_app_context, has_request_context, request

FALLBACK_LOCALE = 'en'


def get_request_locale() -> str:
    """Return the locale code the current request asked for.

    Order: ``g.locale`` (set by the before_request hook or the host app),
    the ``lang`` query parameter, the app's DEFAULT_LOCALE, then 'en'.
    """
    if has_app_context() and g.get('locale'):
        return g.locale

    if has_request_context():
        lang = request.args.get('lang')
        if lang:
            return lang.strip()

    if has_app_context():
        return current_app.config.get('DEFAULT_LOCALE', FALLBACK_LOCALE)

    return FALLBACK_LOCALE


def init_request_locale(app):
    """Register the hook that stores ``?lang=`` on ``g.locale``."""

    @app.before_request
    def set_request_locale():
        lang = request.args.get('lang')
        if lang:
            g.locale = lang.strip()

"""Routes package for the translatable application."""


def register_routes(app):
    """Register all route blueprints with the application."""
    from .locales import locales_bp

    app.register_blueprint(locales_bp, url_prefix='/api/locales')

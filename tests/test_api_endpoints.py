"""
Tests for the locale endpoints and request locale detection.
"""

from translatable.services.request_locale import get_request_locale


class TestHealth:
    """Verify the server boots and responds."""

    def test_root_health(self, client):
        resp = client.get('/health')
        assert resp.status_code == 200
        assert resp.get_json()['status'] == 'ok'


class TestListLocales:
    """Tests for GET /api/locales"""

    def test_list_empty(self, client, db_session):
        resp = client.get('/api/locales')

        assert resp.status_code == 200
        assert resp.json == {'locales': [], 'default_locale': 'en'}

    def test_list_with_data(self, client, locales):
        resp = client.get('/api/locales')

        assert resp.status_code == 200
        codes = [locale['iso_code'] for locale in resp.json['locales']]
        assert codes == ['en', 'fr', 'es']


class TestAddLocale:
    """Tests for POST /api/locales"""

    def test_add_success(self, client, locales):
        resp = client.post('/api/locales', json={'iso_code': 'he', 'name': 'Hebrew', 'rtl': True})

        assert resp.status_code == 201
        assert resp.json['locale']['iso_code'] == 'he'
        assert resp.json['locale']['rtl'] is True

    def test_add_duplicate(self, client, locales):
        resp = client.post('/api/locales', json={'iso_code': 'fr', 'name': 'French'})

        assert resp.status_code == 400
        assert list(resp.json['fields']) == ['iso_code']

    def test_add_without_body(self, client, db_session):
        resp = client.post('/api/locales')

        assert resp.status_code == 400
        assert sorted(resp.json['fields']) == ['iso_code', 'name']

    def test_add_with_list_body(self, client, db_session):
        resp = client.post('/api/locales', json=['x'])

        assert resp.status_code == 400
        assert sorted(resp.json['fields']) == ['iso_code', 'name']


class TestDefaultLocale:
    """Tests for PUT /api/locales/default"""

    def test_set_default(self, client, locales, registry):
        resp = client.put('/api/locales/default', json={'iso_code': 'fr'})

        assert resp.status_code == 200
        assert resp.json == {'default_locale': 'fr', 'default_locale_id': locales['fr']}
        assert registry.id('unknown') == locales['fr']

    def test_set_unsupported_default(self, client, locales):
        resp = client.put('/api/locales/default', json={'iso_code': 'de'})

        assert resp.status_code == 422
        assert 'de' in resp.json['error']

    def test_missing_iso_code(self, client, locales):
        resp = client.put('/api/locales/default', json={})
        assert resp.status_code == 400

    def test_list_body(self, client, locales):
        resp = client.put('/api/locales/default', json=['fr'])
        assert resp.status_code == 400


class TestRequestLocale:
    """Tests for detecting the request locale."""

    def test_lang_query_parameter_is_stored_on_g(self, app, db_session):
        with app.test_request_context('/health?lang=fr'):
            app.preprocess_request()
            assert get_request_locale() == 'fr'

    def test_falls_back_to_configured_default(self, app, db_session):
        with app.test_request_context('/health'):
            app.preprocess_request()
            assert get_request_locale() == app.config['DEFAULT_LOCALE']

    def test_outside_app_context(self):
        assert get_request_locale() == 'en'

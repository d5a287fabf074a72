"""Locale routes - list, register and pick the default locale."""

import logging

from flask import Blueprint, request, jsonify

from translatable.exceptions import LocaleNotSupported, ValidationError
from translatable.services.locales import get_locales

logger = logging.getLogger(__name__)

locales_bp = Blueprint('locales', __name__)


@locales_bp.route('', methods=['GET'])
def list_locales():
    """Get all registered locales and the current default."""
    locales = get_locales()
    return jsonify({
        'locales': locales.all(),
        'default_locale': locales.default_locale(),
    }), 200


@locales_bp.route('', methods=['POST'])
def add_locale():
    """Register a new locale.

    Body: name, iso_code, optional charset and rtl.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    try:
        locale = get_locales().add(data)
    except ValidationError as e:
        return jsonify(e.to_dict()), 400

    return jsonify({
        'message': 'Locale created successfully',
        'locale': locale.to_dict()
    }), 201


@locales_bp.route('/default', methods=['PUT'])
def set_default_locale():
    """Change the default locale used for unknown locale codes."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    iso_code = data.get('iso_code')

    if not iso_code:
        return jsonify({'error': 'iso_code is required'}), 400

    try:
        locales = get_locales().set_default_locale(iso_code)
    except LocaleNotSupported as e:
        return jsonify({'error': str(e)}), 422

    logger.info(f"Default locale set to {iso_code}")
    return jsonify({
        'default_locale': locales.default_locale(),
        'default_locale_id': locales.default_locale_id(),
    }), 200

"""Static locale list used by ``LocaleRegistry.seed``.

Maps ISO code -> {name, charset?, rtl?}.
"""

LOCALES = {
    'af': {'name': 'Afrikaans', 'charset': 'UTF-8'},
    'am': {'name': 'Amharic', 'charset': 'UTF-8'},
    'ar': {'name': 'Arabic', 'charset': 'UTF-8', 'rtl': True},
    'az': {'name': 'Azerbaijani', 'charset': 'UTF-8'},
    'be': {'name': 'Belarusian', 'charset': 'UTF-8'},
    'bg': {'name': 'Bulgarian', 'charset': 'UTF-8'},
    'bn': {'name': 'Bengali', 'charset': 'UTF-8'},
    'bs': {'name': 'Bosnian', 'charset': 'UTF-8'},
    'ca': {'name': 'Catalan', 'charset': 'UTF-8'},
    'cs': {'name': 'Czech', 'charset': 'UTF-8'},
    'cy': {'name': 'Welsh', 'charset': 'UTF-8'},
    'da': {'name': 'Danish', 'charset': 'UTF-8'},
    'de': {'name': 'German', 'charset': 'UTF-8'},
    'el': {'name': 'Greek', 'charset': 'UTF-8'},
    'en': {'name': 'English', 'charset': 'UTF-8'},
    'es': {'name': 'Spanish', 'charset': 'UTF-8'},
    'et': {'name': 'Estonian', 'charset': 'UTF-8'},
    'eu': {'name': 'Basque', 'charset': 'UTF-8'},
    'fa': {'name': 'Persian', 'charset': 'UTF-8', 'rtl': True},
    'fi': {'name': 'Finnish', 'charset': 'UTF-8'},
    'fil': {'name': 'Filipino', 'charset': 'UTF-8'},
    'fr': {'name': 'French', 'charset': 'UTF-8'},
    'ga': {'name': 'Irish', 'charset': 'UTF-8'},
    'gl': {'name': 'Galician', 'charset': 'UTF-8'},
    'gu': {'name': 'Gujarati', 'charset': 'UTF-8'},
    'he': {'name': 'Hebrew', 'charset': 'UTF-8', 'rtl': True},
    'hi': {'name': 'Hindi', 'charset': 'UTF-8'},
    'hr': {'name': 'Croatian', 'charset': 'UTF-8'},
    'hu': {'name': 'Hungarian', 'charset': 'UTF-8'},
    'hy': {'name': 'Armenian', 'charset': 'UTF-8'},
    'id': {'name': 'Indonesian', 'charset': 'UTF-8'},
    'is': {'name': 'Icelandic', 'charset': 'UTF-8'},
    'it': {'name': 'Italian', 'charset': 'UTF-8'},
    'ja': {'name': 'Japanese', 'charset': 'UTF-8'},
    'ka': {'name': 'Georgian', 'charset': 'UTF-8'},
    'kk': {'name': 'Kazakh', 'charset': 'UTF-8'},
    'km': {'name': 'Khmer', 'charset': 'UTF-8'},
    'kn': {'name': 'Kannada', 'charset': 'UTF-8'},
    'ko': {'name': 'Korean', 'charset': 'UTF-8'},
    'ky': {'name': 'Kyrgyz', 'charset': 'UTF-8'},
    'lo': {'name': 'Lao', 'charset': 'UTF-8'},
    'lt': {'name': 'Lithuanian', 'charset': 'UTF-8'},
    'lv': {'name': 'Latvian', 'charset': 'UTF-8'},
    'mk': {'name': 'Macedonian', 'charset': 'UTF-8'},
    'ml': {'name': 'Malayalam', 'charset': 'UTF-8'},
    'mn': {'name': 'Mongolian', 'charset': 'UTF-8'},
    'mr': {'name': 'Marathi', 'charset': 'UTF-8'},
    'ms': {'name': 'Malay', 'charset': 'UTF-8'},
    'my': {'name': 'Burmese', 'charset': 'UTF-8'},
    'ne': {'name': 'Nepali', 'charset': 'UTF-8'},
    'nl': {'name': 'Dutch', 'charset': 'UTF-8'},
    'no': {'name': 'Norwegian', 'charset': 'UTF-8'},
    'pa': {'name': 'Punjabi', 'charset': 'UTF-8'},
    'pl': {'name': 'Polish', 'charset': 'UTF-8'},
    'ps': {'name': 'Pashto', 'charset': 'UTF-8', 'rtl': True},
    'pt': {'name': 'Portuguese', 'charset': 'UTF-8'},
    'pt-BR': {'name': 'Portuguese (Brazil)', 'charset': 'UTF-8'},
    'ro': {'name': 'Romanian', 'charset': 'UTF-8'},
    'ru': {'name': 'Russian', 'charset': 'UTF-8'},
    'si': {'name': 'Sinhala', 'charset': 'UTF-8'},
    'sk': {'name': 'Slovak', 'charset': 'UTF-8'},
    'sl': {'name': 'Slovenian', 'charset': 'UTF-8'},
    'sq': {'name': 'Albanian', 'charset': 'UTF-8'},
    'sr': {'name': 'Serbian', 'charset': 'UTF-8'},
    'sv': {'name': 'Swedish', 'charset': 'UTF-8'},
    'sw': {'name': 'Swahili', 'charset': 'UTF-8'},
    'ta': {'name': 'Tamil', 'charset': 'UTF-8'},
    'te': {'name': 'Telugu', 'charset': 'UTF-8'},
    'th': {'name': 'Thai', 'charset': 'UTF-8'},
    'tr': {'name': 'Turkish', 'charset': 'UTF-8'},
    'uk': {'name': 'Ukrainian', 'charset': 'UTF-8'},
    'ur': {'name': 'Urdu', 'charset': 'UTF-8', 'rtl': True},
    'uz': {'name': 'Uzbek', 'charset': 'UTF-8'},
    'vi': {'name': 'Vietnamese', 'charset': 'UTF-8'},
    'yi': {'name': 'Yiddish', 'charset': 'UTF-8', 'rtl': True},
    'zh': {'name': 'Chinese (Simplified)', 'charset': 'UTF-8'},
    'zh-TW': {'name': 'Chinese (Traditional)', 'charset': 'UTF-8'},
    'zu': {'name': 'Zulu', 'charset': 'UTF-8'},
}

"""
Tests for removing translations when their model is deleted.
"""

from translatable import db
from translatable.models import Translation
from tests.models import Article, Product, add_rows


def _count(model):
    return Translation.query.filter_by(
        translatable_type=model.translatable_type_name(),
        translatable_id=model.id,
    ).count()


class TestHardDelete:
    """Models without soft deletes lose their translations on delete."""

    def test_delete_removes_all_rows(self, locales, product, second_product):
        product.save_translations({'title': 'Hello', 'description': 'Thing'}, locales['en'])
        product.save_translations({'title': 'Bonjour'}, locales['fr'])
        second_product.save_translations({'title': 'Other'}, locales['en'])
        product_id = product.id

        db.session.delete(product)
        db.session.commit()

        assert Translation.query.filter_by(translatable_type='Product', translatable_id=product_id).count() == 0
        assert _count(second_product) == 1

    def test_delete_translations_directly(self, locales, product):
        add_rows(product, locales['en'], title='Hello')
        product.load_translation()

        product.delete_translations()
        db.session.commit()

        assert _count(product) == 0
        assert product.get_cached_locale_translations() == {}
        assert db.session.get(Product, product.id) is not None


class TestSoftDelete:
    """Soft-deletable models keep translations until physically deleted."""

    def test_soft_delete_keeps_rows(self, locales, article):
        article.save_translations({'headline': 'Breaking'}, locales['en'])

        article.soft_delete()

        assert article.trashed()
        assert _count(article) == 1
        assert Article.without_trashed().count() == 0

    def test_restore(self, locales, article):
        article.soft_delete()
        article.restore()

        assert not article.trashed()
        assert Article.without_trashed().count() == 1

    def test_force_delete_removes_rows(self, locales, article):
        article.save_translations({'headline': 'Breaking'}, locales['en'])
        article.soft_delete()
        article_id = article.id

        article.force_delete()

        assert db.session.get(Article, article_id) is None
        assert Translation.query.filter_by(translatable_type='Article', translatable_id=article_id).count() == 0
        assert article.is_force_deleting() is False

    def test_session_delete_removes_rows(self, locales, article):
        article.save_translations({'headline': 'Breaking'}, locales['en'])
        article.save_translations({'headline': 'Urgent'}, locales['fr'])
        article_id = article.id

        db.session.delete(article)
        db.session.commit()

        assert db.session.get(Article, article_id) is None
        assert Translation.query.filter_by(translatable_type='Article', translatable_id=article_id).count() == 0

    def test_not_force_deleting_while_alive(self, article):
        assert article.is_force_deleting() is False

        article.soft_delete()

        assert article.is_force_deleting() is False

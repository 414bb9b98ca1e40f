from django.db import connections
from django.template.loader import get_template
from django.test import SimpleTestCase


class SettingsTests(SimpleTestCase):
    def test_no_local_database(self):
        self.assertEqual(
            connections['default'].settings_dict['ENGINE'], 'django.db.backends.dummy'
        )

    def test_project_templates_resolve(self):
        for name in [
            'base.html', '404.html', 'landing_page.html', 'contact.html',
            'admission_form.html', 'admission_thank_you.html',
            'courses.html', 'materials.html', 'announcements.html',
            'partials/input.html',
        ]:
            with self.subTest(template=name):
                self.assertIsNotNone(get_template(name))

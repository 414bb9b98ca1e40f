from django.test import SimpleTestCase, override_settings
from django.urls import reverse
from django.utils import timezone

NAV_LINKS = [
    ('/', 'Home'),
    ('/admission', 'Admission'),
    ('/courses', 'Courses'),
    ('/materials', 'Study Materials'),
    ('/announcements', 'Announcements'),
    ('/contact', 'Contact'),
]


class RouteTableTests(SimpleTestCase):
    def test_six_routes(self):
        self.assertEqual(reverse('home'), '/')
        self.assertEqual(reverse('admission'), '/admission')
        self.assertEqual(reverse('courses'), '/courses')
        self.assertEqual(reverse('materials'), '/materials')
        self.assertEqual(reverse('announcements'), '/announcements')
        self.assertEqual(reverse('contact'), '/contact')


class LayoutTests(SimpleTestCase):
    def test_home_renders_shell(self):
        response = self.client.get('/')

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Indium Science Academy')
        self.assertContains(response, 'Where Learning Shines Brighter')
        for href, label in NAV_LINKS:
            self.assertContains(response, f'<a href="{href}" class="hover:text-blue-600">{label}</a>', html=True)
        self.assertContains(
            response,
            f'{timezone.now().year} Indium Science Academy. All rights reserved.',
        )

    @override_settings(ACADEMY_NAME='Test Academy', ACADEMY_TAGLINE='Learn more')
    def test_brand_comes_from_settings(self):
        response = self.client.get(reverse('contact'))
        self.assertContains(response, 'Test Academy')
        self.assertContains(response, 'Learn more')

    def test_unknown_path_renders_empty_shell(self):
        response = self.client.get('/no-such-page')

        self.assertEqual(response.status_code, 404)
        self.assertContains(response, 'Study Materials', status_code=404)
        self.assertContains(response, '<main></main>', status_code=404)

    def test_trailing_slash_is_not_redirected(self):
        response = self.client.get('/courses/')
        self.assertEqual(response.status_code, 404)


class HomeViewTests(SimpleTestCase):
    def test_feature_cards_and_calls_to_action(self):
        response = self.client.get(reverse('home'))

        self.assertEqual(len(response.context['features']), 4)
        self.assertContains(response, 'Apply online for the new academic year.')
        self.assertContains(response, 'Access PDFs, videos, and notes.')
        self.assertContains(response, 'bg-orange-500')

    @override_settings(SPLINE_SCENE_URL='https://scene.example.com/hero.splinecode')
    def test_embeds_scene(self):
        response = self.client.get(reverse('home'))
        self.assertContains(response, 'url="https://scene.example.com/hero.splinecode"')


@override_settings(
    ACADEMY_ADDRESS='Indium Science Academy, Kapaleshwar Nagar, Nashik',
    ACADEMY_PHONE='+91 98765 43210',
)
class ContactViewTests(SimpleTestCase):
    def test_contact_links(self):
        response = self.client.get(reverse('contact'))

        self.assertContains(response, 'Contact Us')
        self.assertContains(response, 'Indium Science Academy, Kapaleshwar Nagar, Nashik</p>')
        self.assertContains(response, 'href="tel:+91 98765 43210"')
        self.assertContains(response, 'href="https://wa.me/919876543210"')
        self.assertContains(
            response,
            'href="https://maps.google.com/?q=Indium%20Science%20Academy%2C%20Kapaleshwar%20Nagar%2C%20Nashik"',
        )

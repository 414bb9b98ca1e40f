# apps/admissions/forms.py
from django import forms

BOARD_CHOICES = (
    ('SSC', 'SSC'),
    ('CBSE', 'CBSE'),
)

INPUT_CLASS = 'mt-1 w-full rounded border px-3 py-2 focus:outline-none focus:ring-2 focus:ring-blue-500'


class AdmissionForm(forms.Form):
    """
    Admission draft as typed by the visitor.

    Only the required/type constraints the browser already enforces are
    checked here. Text is kept as typed.
    """
    student_name = forms.CharField(label='Student Name', strip=False)
    standard = forms.CharField(label='Standard / Class', strip=False)
    board = forms.ChoiceField(label='Board', choices=BOARD_CHOICES, initial='SSC')
    dob = forms.DateField(
        label='Date of Birth',
        input_formats=['%Y-%m-%d'],
        widget=forms.DateInput(attrs={'type': 'date'}, format='%Y-%m-%d'),
    )
    parent_name = forms.CharField(label='Parent’s Name', strip=False)
    mobile = forms.CharField(label='Mobile Number', strip=False)
    address = forms.CharField(
        label='Address',
        strip=False,
        widget=forms.Textarea(attrs={'rows': 3}),
    )
    previous_school = forms.CharField(label='Previous School', required=False, strip=False)
    photo_url = forms.CharField(
        label='Photo URL',
        required=False,
        strip=False,
        widget=forms.URLInput(),
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field in self.fields.values():
            field.widget.attrs.setdefault('class', INPUT_CLASS)

"""Forms for the searchengine app.

Each form maps onto one graph operation. Urls are free-form tokens rather
than validated URLs because the data files use bare host names such as
``example.com``; whitespace is rejected since it separates tokens in the
data files.
"""

from __future__ import annotations

from django import forms

from .webgraph import OrderBy


class UrlTokenField(forms.CharField):
    """Single whitespace-free token identifying a page."""

    def __init__(self, **kwargs) -> None:
        kwargs.setdefault('max_length', 300)
        super().__init__(**kwargs)

    def clean(self, value):
        cleaned = super().clean(value)
        if cleaned and len(cleaned.split()) != 1:
            raise forms.ValidationError('A URL must be a single token without spaces.')
        return cleaned


class AddPageForm(forms.Form):
    """Register a new page with its keywords."""

    url = UrlTokenField(
        label='URL',
        widget=forms.TextInput(attrs={'placeholder': 'example.com'}),
    )
    keywords = forms.CharField(
        required=False,
        label='Keywords',
        help_text='Space-separated keywords.',
        widget=forms.TextInput(attrs={'placeholder': 'news sports weather'}),
    )

    def clean_keywords(self) -> list[str]:
        return self.cleaned_data.get('keywords', '').split()


class RemovePageForm(forms.Form):
    url = UrlTokenField(label='URL')


class LinkForm(forms.Form):
    """Source and destination of a directed link."""

    source = UrlTokenField(label='Source URL')
    destination = UrlTokenField(label='Destination URL')


class SearchForm(forms.Form):
    q = forms.CharField(required=False, label='Keyword', max_length=200)

    def clean_q(self) -> str:
        return self.cleaned_data.get('q', '').strip()


class OrderForm(forms.Form):
    """Ordering choice for the page table, keyed by the menu letters."""

    order = forms.ChoiceField(
        required=False,
        choices=[(member.value, member.label) for member in OrderBy],
        initial=OrderBy.INDEX.value,
    )

    def clean_order(self) -> OrderBy:
        value = self.cleaned_data.get('order') or OrderBy.INDEX.value
        return OrderBy.from_code(value)

"""Django views for the searchengine app.

The views render the page table, the raw link matrix and keyword search
results, and accept POSTed mutations of the graph. Graph errors are
reported through the messages framework; they never abort a request.
"""

from __future__ import annotations

import logging
from typing import Callable

from django.apps import apps
from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_POST

from .forms import AddPageForm, LinkForm, OrderForm, RemovePageForm, SearchForm
from .services import GraphService
from .webgraph import OrderBy, WebGraphError

logger = logging.getLogger(__name__)


def get_service() -> GraphService:
    return apps.get_app_config('searchengine').graph_service


def _form_errors(form) -> str:
    return ' '.join(error for errors in form.errors.values() for error in errors)


def _apply(request: HttpRequest, operation: Callable[[], None], success: str) -> HttpResponse:
    try:
        operation()
    except WebGraphError as exc:
        logger.warning('Rejected graph operation: %s', exc)
        messages.error(request, f'Error: {exc}')
    else:
        messages.success(request, success)
    return redirect('searchengine:home')


@require_GET
def home(request: HttpRequest) -> HttpResponse:
    """Render the page table in the requested order."""

    order_form = OrderForm(request.GET or None)
    order_by = order_form.cleaned_data['order'] if order_form.is_valid() else OrderBy.INDEX
    rows = get_service().table(order_by)
    return render(
        request,
        'searchengine/home.html',
        {
            'rows': rows,
            'order_form': order_form,
            'order_by': order_by,
            'add_page_form': AddPageForm(),
            'remove_page_form': RemovePageForm(),
            'link_form': LinkForm(),
            'search_form': SearchForm(),
        },
    )


@require_GET
def matrix(request: HttpRequest) -> HttpResponse:
    """Serve the raw adjacency matrix as plain text."""

    return HttpResponse(get_service().render_matrix() + '\n', content_type='text/plain')


@require_GET
def search(request: HttpRequest) -> HttpResponse:
    """List pages carrying the keyword, highest rank first."""

    form = SearchForm(request.GET)
    keyword = form.cleaned_data['q'] if form.is_valid() else ''
    results = get_service().search(keyword)
    return render(
        request,
        'searchengine/search.html',
        {
            'form': form,
            'keyword': keyword,
            'results': results,
        },
    )


@require_POST
def add_page(request: HttpRequest) -> HttpResponse:
    form = AddPageForm(request.POST)
    if not form.is_valid():
        messages.error(request, _form_errors(form))
        return redirect('searchengine:home')
    url = form.cleaned_data['url']
    return _apply(
        request,
        lambda: get_service().add_page(url, form.cleaned_data['keywords']),
        f'{url} successfully added to the WebGraph!',
    )


@require_POST
def remove_page(request: HttpRequest) -> HttpResponse:
    form = RemovePageForm(request.POST)
    if not form.is_valid():
        messages.error(request, _form_errors(form))
        return redirect('searchengine:home')
    url = form.cleaned_data['url']
    return _apply(request, lambda: get_service().remove_page(url), f'{url} has been removed from the graph!')


@require_POST
def add_link(request: HttpRequest) -> HttpResponse:
    form = LinkForm(request.POST)
    if not form.is_valid():
        messages.error(request, _form_errors(form))
        return redirect('searchengine:home')
    source = form.cleaned_data['source']
    destination = form.cleaned_data['destination']
    return _apply(
        request,
        lambda: get_service().add_link(source, destination),
        f'Link successfully added from {source} to {destination}!',
    )


@require_POST
def remove_link(request: HttpRequest) -> HttpResponse:
    form = LinkForm(request.POST)
    if not form.is_valid():
        messages.error(request, _form_errors(form))
        return redirect('searchengine:home')
    source = form.cleaned_data['source']
    destination = form.cleaned_data['destination']
    return _apply(
        request,
        lambda: get_service().remove_link(source, destination),
        f'Link removed from {source} to {destination}!',
    )

"""Interactive text menu over a web graph loaded from the data files.

Usage::

    python manage.py searchengine --pages pages.txt --links links.txt

Menu commands (case-insensitive): AP add page, RP remove page, AL add
link, RL remove link, P print (then I/U/R for the ordering), M print the
raw link matrix, S search, Q quit. End of input also quits.
"""

from __future__ import annotations

import logging
import sys

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from searchengine.webgraph import OrderBy, WebGraph, WebGraphError, load_config, load_graph

logger = logging.getLogger(__name__)

MAIN_MENU = (
    "Menu:\n"
    "    (AP) - Add a new page to the graph.\n"
    "    (RP) - Remove a page from the graph.\n"
    "    (AL) - Add a link between pages in the graph.\n"
    "    (RL) - Remove a link between pages in the graph.\n"
    "    (P)  - Print the graph.\n"
    "    (M)  - Print the link matrix.\n"
    "    (S)  - Search for pages with a keyword.\n"
    "    (Q)  - Quit.\n"
)

ORDER_MENU = "\n" + "".join(
    f"    ({member.value.upper()}) {member.label}\n" for member in OrderBy
)


class EndOfInput(Exception):
    """Raised when the input stream is exhausted."""


class Command(BaseCommand):
    help = 'Run the interactive WebGraph search menu.'
    stealth_options = ('stdin',)

    def add_arguments(self, parser) -> None:
        parser.add_argument('--pages', help='Pages file (url followed by keywords on each line).')
        parser.add_argument('--links', help='Links file (source and destination url on each line).')
        parser.add_argument('--config', help='YAML engine configuration file.')

    def handle(self, *args, **options) -> None:
        self.stdin = options.get('stdin') or sys.stdin
        config = load_config(options.get('config') or getattr(settings, 'SEARCHENGINE_CONFIG', None))
        pages_file = options.get('pages') or getattr(settings, 'SEARCHENGINE_PAGES_FILE', config.pages_file)
        links_file = options.get('links') or getattr(settings, 'SEARCHENGINE_LINKS_FILE', config.links_file)

        self.stdout.write('Loading WebGraph data...')
        try:
            graph = load_graph(pages_file, links_file, config)
        except WebGraphError as exc:
            raise CommandError(f'Could not load the WebGraph: {exc}') from exc
        self.stdout.write(self.style.SUCCESS('Success!\n'))

        try:
            self.run_menu(graph)
        except EndOfInput:
            pass
        self.stdout.write('\nGoodbye.')

    def prompt(self, message: str) -> str:
        self.stdout.write(message, ending='')
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EndOfInput()
        return line.rstrip('\r\n')

    def report_error(self, exc: WebGraphError) -> None:
        logger.warning('Rejected graph operation: %s', exc)
        self.stdout.write(self.style.ERROR(f'ERROR: {exc}'))

    def run_menu(self, graph: WebGraph) -> None:
        handlers = {
            'ap': self.add_page,
            'rp': self.remove_page,
            'al': self.add_link,
            'rl': self.remove_link,
            'p': self.print_graph,
            'm': self.print_matrix,
            's': self.search,
        }
        while True:
            self.stdout.write(MAIN_MENU)
            choice = self.prompt('Please select an option: ').strip().lower()
            if choice == 'q':
                return
            handler = handlers.get(choice)
            if handler is None:
                self.stdout.write('Invalid input.')
            else:
                try:
                    handler(graph)
                except WebGraphError as exc:
                    self.report_error(exc)
            self.stdout.write('')

    def add_page(self, graph: WebGraph) -> None:
        url = self.prompt('Enter a URL: ').strip()
        keywords = self.prompt('Enter keywords (space-separated): ').split()
        graph.add_page(url, keywords)
        self.stdout.write(f'{url} successfully added to the WebGraph!')

    def remove_page(self, graph: WebGraph) -> None:
        url = self.prompt('Enter a URL: ').strip()
        graph.remove_page(url)
        self.stdout.write(f'{url} has been removed from the graph!')

    def add_link(self, graph: WebGraph) -> None:
        source = self.prompt('Enter a source URL: ').strip()
        destination = self.prompt('Enter a destination URL: ').strip()
        graph.add_link(source, destination)
        self.stdout.write(f'Link successfully added from {source} to {destination}!')

    def remove_link(self, graph: WebGraph) -> None:
        source = self.prompt('Enter a source URL: ').strip()
        destination = self.prompt('Enter a destination URL: ').strip()
        graph.remove_link(source, destination)
        self.stdout.write(f'Link removed from {source} to {destination}!')

    def print_graph(self, graph: WebGraph) -> None:
        self.stdout.write(ORDER_MENU)
        code = self.prompt('Please select an option: ')
        try:
            order_by = OrderBy.from_code(code)
        except ValueError:
            self.stdout.write('Invalid input.')
            return
        self.stdout.write(graph.render(order_by))

    def print_matrix(self, graph: WebGraph) -> None:
        self.stdout.write(graph.render_matrix())

    def search(self, graph: WebGraph) -> None:
        keyword = self.prompt('Search keyword: ').strip()
        results = graph.search(keyword)
        if not results:
            self.stdout.write(f'No search results found for the keyword {keyword}.')
            return
        self.stdout.write(graph.render_search(keyword))

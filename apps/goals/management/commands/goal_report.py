from django.core.management.base import BaseCommand, CommandError
from apps.goals.adapters.orm_repositories import DjangoGoalRepository
from apps.goals.application.store import GoalStore
from apps.goals.domain.exceptions import InvalidInput
from apps.goals.domain.services.reports import format_rate


class Command(BaseCommand):
    help = 'Wyświetla raport postępu i raport przeglądu celów'

    def add_arguments(self, parser):
        parser.add_argument('--today', help="Dzień raportu (YYYY-M-D), domyślnie dzisiaj")

    def handle(self, *args, **options):
        store = GoalStore.load(DjangoGoalRepository())

        try:
            review = store.review(today=options.get('today'))
        except InvalidInput as e:
            raise CommandError(str(e))

        progress = store.progress()

        self.stdout.write(self.style.SUCCESS('Raport postępu'))
        self.stdout.write(f"Skuteczność: {format_rate(progress.rate)}%")
        self.stdout.write(f"Ukończone cele: {progress.completed_count} / {progress.total}")

        self.stdout.write(self.style.SUCCESS('Raport przeglądu'))
        self.stdout.write(f"Dni pod rząd: {review.streak}")
        self.stdout.write(f"Łącznie ukończeń: {review.total_completed}")
        for frequency, rate in review.rates_by_frequency.items():
            self.stdout.write(f"- {frequency}: {format_rate(rate)}%")

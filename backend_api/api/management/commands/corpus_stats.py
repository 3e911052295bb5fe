from django.apps import apps
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = "Summarize the loaded word corpus: size, words per length and palindromes."

    def add_arguments(self, parser):
        parser.add_argument("--length", type=int, help="Also list the words of this length.")

    def handle(self, *args, **options):
        # PUBLIC_INTERFACE
        # Read-only; reports on the corpus loaded by ApiConfig.ready().
        dictionary = apps.get_app_config("api").engine.dictionary
        if len(dictionary) == 0:
            self.stdout.write(self.style.WARNING("Word corpus is empty or could not be loaded."))
            return

        self.stdout.write(self.style.SUCCESS(f"Loaded {len(dictionary)} words."))
        for length, count in dictionary.length_counts().items():
            self.stdout.write(f"  {length:>2} letters: {count}")
        self.stdout.write(f"Palindromes: {len(dictionary.palindrome_words())}")

        length = options.get("length")
        if length:
            words = dictionary.search(length=length)
            self.stdout.write(f"Words of length {length}: {', '.join(words) or '-'}")

"""Load events from a JSON file through the event service."""

import json
import logging
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from events.domain.errors import DomainError, SlugConflictError
from events.services import get_event_service

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Import events from a JSON file containing a list of event objects."

    def add_arguments(self, parser):
        parser.add_argument("path", type=Path, help="JSON file with a list of events")
        parser.add_argument(
            "--update",
            action="store_true",
            help="Update events whose slug already exists instead of skipping them",
        )

    def handle(self, *args, **options):
        path: Path = options["path"]
        try:
            payloads = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise CommandError(f"Could not read {path}: {exc}") from exc
        if not isinstance(payloads, list):
            raise CommandError("Expected a JSON list of events")

        service = get_event_service()
        created = updated = failed = 0
        for index, payload in enumerate(payloads):
            if not isinstance(payload, dict):
                logger.error("Item %d is not an object", index)
                failed += 1
                continue
            try:
                try:
                    event = service.create_event(payload)
                    created += 1
                except SlugConflictError as conflict:
                    if not options["update"]:
                        raise
                    event = service.update_event(conflict.slug, payload)
                    updated += 1
            except DomainError as exc:
                logger.error("Item %d (%s) rejected: %s", index, payload.get("title"), exc)
                self.stderr.write(f"[{index}] {exc}")
                failed += 1
                continue
            self.stdout.write(f"[{index}] {event.slug}")

        summary = f"{created} created, {updated} updated, {failed} failed"
        logger.info("Event import finished: %s", summary)
        self.stdout.write(self.style.SUCCESS(summary))

from __future__ import annotations

from noble_lineage.core.context import RunContext
from noble_lineage.core.exceptions import LineageError, PipelineExecutionError
from noble_lineage.loader.json_store import PersonStore
from noble_lineage.migration.migrator import MigrationReport, build_migration_report, migrate_person
from noble_lineage.migration.timeline import TimelineAssignmentReport, assign_monarchs_by_lifespan


class MigrationPipeline:
    """
    Orchestrates the "retrieve all, compute, update per record" batch runs.
    The computations live in ``noble_lineage.migration``; this class only
    moves records between them and the store.
    """

    def __init__(self, context: RunContext, store: PersonStore):
        self.ctx = context
        self.store = store
        self.log = context.logger

    def run_name_migration(self) -> MigrationReport:
        """Legacy names -> monarch ids. Writes through the store unless dry-run."""
        self.log.info("Name migration starting (dry_run=%s)", self.ctx.dry_run)

        try:
            people = self.store.get_all_people()
            monarchs = self.store.get_all_monarchs()
            report = build_migration_report(people, monarchs)

            updated = 0
            if not self.ctx.dry_run:
                pending = {d.external_id for d in report.migration_details}
                for person in people:
                    if person.external_id not in pending:
                        continue
                    migrated = migrate_person(person, monarchs)
                    if migrated.monarch_ids:
                        self.store.update_person(migrated)
                        updated += 1

            self.ctx.stats.update(
                {
                    "total": report.total_members,
                    "needing_migration": report.members_needing_migration,
                    "already_migrated": report.members_already_migrated,
                    "unresolved_names": report.total_unresolved,
                    "updated": updated,
                }
            )
            for detail in report.migration_details:
                for name in detail.unresolved_names:
                    self.ctx.add_error(detail.external_id, f"unresolved monarch name {name!r}")
            self.log.info("Name migration complete: %d record(s) updated", updated)
            return report

        except LineageError:
            self.log.exception("Name migration failed")
            raise
        except Exception as exc:
            self.log.exception("Name migration failed")
            raise PipelineExecutionError(str(exc)) from exc

    def run_timeline_assignment(self) -> TimelineAssignmentReport:
        """Lifespan overlap -> monarch ids. Writes through the store unless dry-run."""
        self.log.info("Timeline assignment starting (dry_run=%s)", self.ctx.dry_run)

        try:
            report = assign_monarchs_by_lifespan(
                self.store.get_all_people(),
                self.store.get_all_monarchs(),
                today=self.ctx.today,
                living_sentinel=self.ctx.config.living_sentinel,
            )

            if not self.ctx.dry_run:
                for person in report.updated_people:
                    self.store.update_person(person)

            self.ctx.stats.update(
                {
                    "total": report.total,
                    "processed": report.processed,
                    "updated": report.updated,
                }
            )
            self.log.info(
                "Timeline assignment complete: %d of %d record(s) %s",
                report.updated,
                report.total,
                "would change" if self.ctx.dry_run else "updated",
            )
            return report

        except LineageError:
            self.log.exception("Timeline assignment failed")
            raise
        except Exception as exc:
            self.log.exception("Timeline assignment failed")
            raise PipelineExecutionError(str(exc)) from exc

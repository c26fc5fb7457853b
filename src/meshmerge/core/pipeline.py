from __future__ import annotations

from meshmerge.core.context import MergeContext
from meshmerge.exporter import export_records
from meshmerge.loader.file_locator import expand_inputs
from meshmerge.merger import MergeResult, MeshMerger


class Pipeline:
    """
    Orchestrates a merge run: expand inputs, merge, export.
    No parsing logic lives here.
    """

    def __init__(self, context: MergeContext):
        self.ctx = context
        self.log = context.logger

    def load(self) -> MergeResult:
        paths = expand_inputs(self.ctx.inputs)
        self.log.debug(f"Expanded {len(self.ctx.inputs)} input argument(s) to {len(paths)} file(s)")

        merger = MeshMerger(self.ctx.kind, self.ctx.settings)
        result = merger.run(paths)

        self.ctx.stats["files"] = len(result.files)
        self.ctx.stats["records"] = len(result.records)
        return result

    def run(self) -> MergeResult:
        self.log.info(f"Pipeline starting ({self.ctx.kind.value} merge)")

        result = self.load()
        export_records(result, self.ctx.output_path, self.ctx.settings)

        self.log.info("Pipeline completed successfully")
        return result

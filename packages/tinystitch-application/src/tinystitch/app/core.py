from pathlib import Path
from typing import Optional

from tinystitch.common import bus
from tinystitch.config import ConfigError, load_config_from_path
from tinystitch.io import TinyV2Reader, TinyV2Writer
from tinystitch.needle import L
from tinystitch.spec import (
    MappingFormatError,
    MappingReaderProtocol,
    MappingWriterProtocol,
    MergeError,
    TinyFile,
)
from tinystitch.app.services import LegacyMerger, MappingMerger
from tinystitch.app.types import MergeOptions, MergeResult


class TinyStitchApp:
    def __init__(
        self,
        root_path: Path,
        reader: Optional[MappingReaderProtocol] = None,
        writer: Optional[MappingWriterProtocol] = None,
    ):
        self.root_path = root_path
        self.reader = reader or TinyV2Reader()
        self.writer = writer or TinyV2Writer()
        self.merger = MappingMerger()
        self.legacy_merger = LegacyMerger()

    def resolve_options(
        self, common_namespace: Optional[str], leave_holes: Optional[bool]
    ) -> MergeOptions:
        # Explicit arguments win over [tool.tinystitch].
        config = load_config_from_path(self.root_path)
        return MergeOptions(
            common_namespace=(
                common_namespace
                if common_namespace is not None
                else config.common_namespace
            ),
            leave_holes=leave_holes if leave_holes is not None else config.leave_holes,
        )

    def _read(self, path: Path) -> TinyFile:
        bus.info(L.merge.run.reading, path=path)
        return self.reader.read(path)

    def run_merge(
        self,
        input_a: Path,
        input_b: Path,
        output: Path,
        common_namespace: Optional[str] = None,
        leave_holes: Optional[bool] = None,
    ) -> MergeResult:
        current = input_a
        try:
            options = self.resolve_options(common_namespace, leave_holes)
            file_a = self._read(input_a)
            current = input_b
            file_b = self._read(input_b)

            bus.info(L.merge.run.merging, input_a=input_a, input_b=input_b)
            merged = self.merger.merge(file_a, file_b, options)
            bus.debug(
                L.merge.run.namespaces, namespaces=", ".join(merged.namespaces)
            )

            current = output
            self.writer.write(merged, output)
        except (MappingFormatError, UnicodeDecodeError) as e:
            bus.error(L.error.format.invalid, path=current, error=e)
            return MergeResult(success=False)
        except MergeError as e:
            bus.error(L.error.merge.failed, error=e)
            return MergeResult(success=False)
        except ConfigError as e:
            bus.error(L.error.config.invalid, error=e)
            return MergeResult(success=False)
        except OSError as e:
            bus.error(L.error.io.failed, path=e.filename or current, error=e)
            return MergeResult(success=False)

        result = MergeResult(
            success=True,
            output=output,
            class_count=len(merged.classes),
            method_count=sum(len(c.methods) for c in merged.classes),
            field_count=sum(len(c.fields) for c in merged.classes),
        )
        bus.info(
            L.merge.run.summary,
            classes=result.class_count,
            methods=result.method_count,
            fields=result.field_count,
        )
        bus.success(L.merge.run.success, path=output)
        return result

    def run_merge_legacy(
        self,
        input_a: Path,
        input_b: Path,
        output: Path,
        common_namespace: Optional[str] = None,
        leave_holes: Optional[bool] = None,
    ) -> MergeResult:
        try:
            options = self.resolve_options(common_namespace, leave_holes)
            bus.info(L.merge.run.merging, input_a=input_a, input_b=input_b)
            extra_namespaces = self.legacy_merger.merge(
                input_a,
                input_b,
                output,
                common_namespace=options.common_namespace,
                leave_holes=options.leave_holes,
            )
        except (MappingFormatError, UnicodeDecodeError) as e:
            bus.error(L.error.format.invalid, path=f"{input_a} / {input_b}", error=e)
            return MergeResult(success=False)
        except MergeError as e:
            bus.error(L.error.merge.failed, error=e)
            return MergeResult(success=False)
        except ConfigError as e:
            bus.error(L.error.config.invalid, error=e)
            return MergeResult(success=False)
        except FileExistsError:
            bus.error(L.error.io.output_exists, path=output)
            return MergeResult(success=False)
        except OSError as e:
            bus.error(L.error.io.failed, path=e.filename, error=e)
            return MergeResult(success=False)

        bus.info(
            L.merge.legacy.extra_namespaces, namespaces=", ".join(extra_namespaces)
        )
        bus.success(L.merge.legacy.success, path=output)
        return MergeResult(success=True, output=output)

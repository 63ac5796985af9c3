"""
Payload loading service

Builds a registry the way a scanner does at start-up: built-ins first, then
capture files, then template files, then an optional trim to the target
ports.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ...common.enums import SourceKind
from ...config import AppConfig, get_app_config
from ...infrastructure.logging import get_logger
from ..ports import PortSet
from .builtin import DEFAULT_PAYLOADS, BuiltinPayload, bootstrap
from .models import IngestResult
from .pcap_extractor import PcapPayloadExtractor
from .registry import PayloadRegistry
from .template_parser import TemplateParser

PathLike = Union[str, Path]


@dataclass
class LoadReport:
    """Registry plus what happened to each source"""

    registry: PayloadRegistry
    results: List[IngestResult] = field(default_factory=list)
    trimmed: int = 0

    @property
    def success(self) -> bool:
        return all(result.success for result in self.results)

    @property
    def failed(self) -> List[IngestResult]:
        return [result for result in self.results if not result.success]


class PayloadLoader:
    """Creates and fills payload registries according to the configuration"""

    def __init__(self, config: Optional[AppConfig] = None, builtin: Sequence[BuiltinPayload] = DEFAULT_PAYLOADS):
        self.config = config or get_app_config()
        self.builtin = builtin
        self._logger = get_logger("payloads.loader")

    def create_registry(self) -> PayloadRegistry:
        registry = PayloadRegistry()
        if self.config.payloads.load_builtin_payloads:
            self._bootstrap(registry)
        return registry

    def _bootstrap(self, registry: PayloadRegistry) -> IngestResult:
        added = bootstrap(registry, self.builtin)
        self._logger.debug(f"Loaded {added} built-in payloads")
        return IngestResult(source="<builtin>", kind=SourceKind.BUILTIN, added=added, records=len(self.builtin))

    def load(
        self,
        templates: Sequence[PathLike] = (),
        captures: Sequence[PathLike] = (),
        keep_ports: Optional[Union[str, PortSet]] = None,
        registry: Optional[PayloadRegistry] = None,
    ) -> LoadReport:
        """Merge every source into ``registry`` (a new one by default)

        A source that fails to open or parse is reported in the result list;
        the remaining sources are still loaded.

        Raises:
            PortSpecError: ``keep_ports`` is a malformed port list
        """
        if isinstance(keep_ports, str):
            keep_ports = PortSet.from_string(keep_ports)

        if registry is None:
            registry = PayloadRegistry()
            report = LoadReport(registry=registry)
            if self.config.payloads.load_builtin_payloads:
                report.results.append(self._bootstrap(registry))
        else:
            report = LoadReport(registry=registry)

        settings = self.config.payloads
        extractor = PcapPayloadExtractor(registry, settings.max_frame_size)
        parser = TemplateParser(registry, settings.max_template_size, settings.strict_payload_size)

        for path in captures:
            report.results.append(extractor.load_file(path))
        for path in templates:
            report.results.append(parser.load_file(path))

        if keep_ports is not None:
            report.trimmed = registry.trim(keep_ports)

        added = sum(r.added for r in report.results if r.kind is not SourceKind.BUILTIN)
        self._logger.info(
            f"Payload registry ready: {len(registry)} ports ({added} added from files, {report.trimmed} trimmed)"
        )
        for result in report.failed:
            self._logger.warning(f"Source not fully loaded: {result}")
        return report

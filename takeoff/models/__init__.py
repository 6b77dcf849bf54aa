"""Takeoff data models."""

from takeoff.models.records import (
    Trade,
    RecordKind,
    PipeTypeCode,
    PipeMaterial,
    StudType,
    PipeRecord,
    FixtureRecord,
    ValveRecord,
    WallSectionRecord,
    CeilingSectionRecord,
    MaterialLineRecord,
    LaborLineRecord,
    GridItemRecord,
    UnknownRecord,
    ExtractedRecord,
)
from takeoff.models.catalog import (
    MatchLevel,
    MaterialCatalogEntry,
    KeywordRule,
    SizeRule,
    NamedPriceTable,
    TradeCatalog,
    MaterialCatalog,
)
from takeoff.models.analysis import (
    AnalysisType,
    CostKind,
    NoteCode,
    NotePriority,
    AnalysisConfig,
    AnalysisNote,
    InstallationNote,
    PricedItem,
    CategoryTotal,
    GrandTotals,
    AnalysisResult,
)

__all__ = [
    "Trade",
    "RecordKind",
    "PipeTypeCode",
    "PipeMaterial",
    "StudType",
    "PipeRecord",
    "FixtureRecord",
    "ValveRecord",
    "WallSectionRecord",
    "CeilingSectionRecord",
    "MaterialLineRecord",
    "LaborLineRecord",
    "GridItemRecord",
    "UnknownRecord",
    "ExtractedRecord",
    "MatchLevel",
    "MaterialCatalogEntry",
    "KeywordRule",
    "SizeRule",
    "NamedPriceTable",
    "TradeCatalog",
    "MaterialCatalog",
    "AnalysisType",
    "CostKind",
    "NoteCode",
    "NotePriority",
    "AnalysisConfig",
    "AnalysisNote",
    "InstallationNote",
    "PricedItem",
    "CategoryTotal",
    "GrandTotals",
    "AnalysisResult",
]

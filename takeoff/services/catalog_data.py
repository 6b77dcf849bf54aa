"""Default material catalog for the takeoff pipeline.

Built once from the tables below into an immutable MaterialCatalog. Callers
that need different prices build their own catalog and inject it into the
pipeline instead of editing these tables.
"""

from typing import Dict

from takeoff.models.catalog import (
    KeywordRule,
    MaterialCatalog,
    MaterialCatalogEntry,
    NamedPriceTable,
    SizeRule,
    TradeCatalog,
)
from takeoff.models.records import PipeMaterial, PipeTypeCode, StudType, Trade


# =============================================================================
# PLUMBING
# =============================================================================

# Unit cost per linear foot by material and nominal size
PIPE_PRICES: Dict[str, Dict[str, float]] = {
    PipeMaterial.PVC.value: {
        '1/2"': 2.95, '3/4"': 3.25, '1"': 3.75, '1-1/4"': 4.25, '1-1/2"': 4.75,
        '2"': 5.25, '3"': 6.50, '4"': 8.25, '6"': 15.50,
    },
    PipeMaterial.COPPER.value: {
        '1/2"': 7.65, '3/4"': 9.85, '1"': 12.35, '1-1/4"': 14.85, '1-1/2"': 17.35,
        '2"': 23.50, '3"': 42.75, '4"': 68.50,
    },
    PipeMaterial.CARBON_STEEL.value: {
        '1/2"': 8.75, '3/4"': 10.25, '1"': 12.50, '1-1/4"': 14.75, '1-1/2"': 16.95,
        '2"': 21.75, '3"': 36.25, '4"': 54.50,
    },
}

# Fallback cost per linear foot when the material has no price table
PIPE_TYPE_PRICES: Dict[str, float] = {
    PipeTypeCode.SOIL.value: 6.50,
    PipeTypeCode.GREASE_WASTE.value: 6.50,
    PipeTypeCode.STORM.value: 8.25,
    PipeTypeCode.VENT.value: 4.75,
    PipeTypeCode.COLD_WATER.value: 9.85,
    PipeTypeCode.HOT_WATER.value: 12.35,
    PipeTypeCode.HOT_WATER_CIRCULATION.value: 14.85,
    PipeTypeCode.GAS.value: 12.50,
    PipeTypeCode.FIRE_PROTECTION.value: 36.25,
}

PIPE_GLOBAL_DEFAULT_PRICE = 10.00

# Installation hours per linear foot by material
PIPE_LABOR_RATES: Dict[str, float] = {
    PipeMaterial.PVC.value: 0.25,
    PipeMaterial.COPPER.value: 0.35,
    PipeMaterial.CARBON_STEEL.value: 0.45,
    PipeMaterial.CAST_IRON.value: 0.50,
    "default": 0.30,
}

# (code, description, material)
_PIPE_TYPES = (
    (PipeTypeCode.SOIL, "Soil/Waste Pipe", PipeMaterial.PVC),
    (PipeTypeCode.GREASE_WASTE, "Grease Waste Pipe", PipeMaterial.PVC),
    (PipeTypeCode.STORM, "Storm Drain Pipe", PipeMaterial.PVC),
    (PipeTypeCode.VENT, "Vent Pipe", PipeMaterial.PVC),
    (PipeTypeCode.COLD_WATER, "Domestic Cold Water", PipeMaterial.COPPER),
    (PipeTypeCode.HOT_WATER, "Domestic Hot Water", PipeMaterial.COPPER),
    (PipeTypeCode.HOT_WATER_CIRCULATION, "Hot Water Circulation", PipeMaterial.COPPER),
    (PipeTypeCode.GAS, "Natural Gas Pipe", PipeMaterial.CARBON_STEEL),
    (PipeTypeCode.FIRE_PROTECTION, "Fire Protection Pipe", PipeMaterial.CARBON_STEEL),
)

# Most specific first: "grease waste" must not resolve to soil/waste,
# "hot water circulation" must not resolve to hot water.
PIPE_KEYWORD_RULES = (
    KeywordRule(keywords=("grease",), code="GW"),
    KeywordRule(keywords=("storm",), code="ST"),
    KeywordRule(keywords=("rain",), code="ST"),
    KeywordRule(keywords=("circ",), code="HWC"),
    KeywordRule(keywords=("recirc",), code="HWC"),
    KeywordRule(keywords=("hot water",), code="HW"),
    KeywordRule(keywords=("cold water",), code="CW"),
    KeywordRule(keywords=("domestic water",), code="CW"),
    KeywordRule(keywords=("soil",), code="SP"),
    KeywordRule(keywords=("waste",), code="SP"),
    KeywordRule(keywords=("sanitary",), code="SP"),
    KeywordRule(keywords=("vent",), code="VP"),
    KeywordRule(keywords=("gas",), code="G"),
    KeywordRule(keywords=("fire",), code="FP"),
    KeywordRule(keywords=("sprinkler",), code="FP"),
)

FIXTURE_PRICES: Dict[str, float] = {
    "Water Closet": 550.00,
    "WC": 550.00,
    "Toilet": 550.00,
    "Lavatory": 325.00,
    "LAV": 325.00,
    "Sink": 295.00,
    "Kitchen Sink": 450.00,
    "Service Sink": 575.00,
    "Mop Sink": 575.00,
    "Hand Sink": 325.00,
    "Floor Drain": 185.00,
    "FD": 185.00,
    "Floor Sink": 225.00,
    "FS": 225.00,
    "Roof Drain": 495.00,
    "RD": 495.00,
    "Area Drain": 285.00,
    "Trench Drain": 825.00,
    "Shower": 625.00,
    "Bath Tub": 775.00,
    "Tub/Shower Combo": 950.00,
    "Dishwasher": 125.00,
    "Washing Machine": 145.00,
    "Ice Maker": 85.00,
    "Drinking Fountain": 950.00,
    "Water Cooler": 1250.00,
    "Bottle Filler": 1450.00,
    "Urinal": 675.00,
    "UR": 675.00,
    "Grease Interceptor": 2750.00,
    "Oil Interceptor": 2250.00,
    "Emergency Shower": 1250.00,
    "Emergency Eyewash": 950.00,
    "Hose Bibb": 65.00,
}

FIXTURE_LABOR_HOURS: Dict[str, float] = {
    "Water Closet": 3.0,
    "Urinal": 3.0,
    "Lavatory": 2.5,
    "Sink": 2.0,
    "Floor Drain": 1.5,
    "Roof Drain": 2.5,
    "Shower": 4.0,
    "Bath Tub": 4.5,
    "Drinking Fountain": 3.0,
    "Grease Interceptor": 8.0,
}

VALVE_PRICES: Dict[str, float] = {
    "Gate Valve": 125.00,
    "Ball Valve": 115.00,
    "Gate/Ball Valve": 120.00,
    "Check Valve": 145.00,
    "Control Valve": 250.00,
    "Butterfly Valve": 185.00,
    "Globe Valve": 155.00,
    "Angle Valve": 165.00,
    "Shutoff Valve": 110.00,
    "Balancing Valve": 275.00,
    "Pressure Reducing Valve": 325.00,
    "Pressure Relief Valve": 295.00,
    "OS&Y Valve": 475.00,
    "Solenoid Valve": 225.00,
    "Zone Valve": 205.00,
    "Thermostatic Mixing Valve": 375.00,
    "Mixing Valve": 750.00,
    "Tempering Valve": 345.00,
    "Gas Cock": 135.00,
    "Gas Valve": 145.00,
    "Earthquake Valve": 685.00,
    "Cleanout": 85.00,
    "Floor Cleanout": 95.00,
    "Wall Cleanout": 105.00,
    "P-Trap": 45.00,
    "P-Trap with Insulation": 65.00,
    "Backflow Preventer": 950.00,
    "Vacuum Breaker": 165.00,
    "Water Hammer Arrestor": 85.00,
    "Expansion Tank": 225.00,
    "Trap Primer": 175.00,
    "Wall Hydrant": 175.00,
    "Access Panel": 95.00,
}

# Valves that need setup and adjustment take longer than a standard valve
VALVE_LABOR_HOURS: Dict[str, float] = {
    "Backflow Preventer": 1.5,
    "Tempering Valve": 1.5,
    "Thermostatic Mixing Valve": 1.5,
    "Mixing Valve": 1.5,
    "Pressure Reducing Valve": 1.5,
    "Control Valve": 1.5,
}


def _plumbing_catalog() -> TradeCatalog:
    entries = [
        MaterialCatalogEntry(
            code=code.value,
            description=description,
            unit="LF",
            unit_size=1.0,
            unit_cost=PIPE_TYPE_PRICES[code.value],
            labor_rate=PIPE_LABOR_RATES[material.value],
            material=material.value,
        )
        for code, description, material in _PIPE_TYPES
    ]
    entries.append(
        MaterialCatalogEntry(
            code=PipeTypeCode.UNKNOWN.value,
            description="Unclassified Pipe",
            unit="LF",
            unit_cost=PIPE_GLOBAL_DEFAULT_PRICE,
            labor_rate=PIPE_LABOR_RATES["default"],
        )
    )
    return TradeCatalog(
        trade=Trade.PLUMBING,
        entries=tuple(entries),
        default_code=PipeTypeCode.UNKNOWN.value,
        keyword_rules=PIPE_KEYWORD_RULES,
        sized_prices=PIPE_PRICES,
        type_prices=PIPE_TYPE_PRICES,
        global_default_price=PIPE_GLOBAL_DEFAULT_PRICE,
        named_prices={
            "fixtures": NamedPriceTable(
                prices=FIXTURE_PRICES,
                default=350.00,
                labor_hours=FIXTURE_LABOR_HOURS,
                default_labor_hours=2.0,
            ),
            "valves": NamedPriceTable(
                prices=VALVE_PRICES,
                default=150.00,
                labor_hours=VALVE_LABOR_HOURS,
                default_labor_hours=0.5,
            ),
        },
        material_labor_rates=PIPE_LABOR_RATES,
        labor_rate_per_hour=85.0,
    )


# =============================================================================
# SHEATHING
# =============================================================================

SHEATHING_ACCESSORY_PRICES: Dict[str, float] = {
    "Fasteners": 15.00,          # box
    "House Wrap": 150.00,        # roll
    "Cement Board": 38.00,       # 4x8 sheet
}


def _sheathing_catalog() -> TradeCatalog:
    def panel(code, description, cost, barrier=False):
        return MaterialCatalogEntry(
            code=code,
            description=description,
            unit_size=32.0,
            unit_cost=cost,
            labor_rate=0.25,
            unit="SHT",
            integrated_barrier=barrier,
        )

    return TradeCatalog(
        trade=Trade.SHEATHING,
        entries=(
            panel("P", '7/16" OSB Sheathing', 25.00),
            panel("E", '1/2" OSB Sheathing', 32.00),
            panel("PG", '1/2" Plywood Sheathing', 45.00),
            panel("PT", '5/8" Plywood Sheathing', 55.00),
            panel("CB", '1/2" ZIP System Sheathing', 75.00, barrier=True),
        ),
        default_code="E",
        keyword_rules=(
            KeywordRule(keywords=("zip",), code="CB"),
            KeywordRule(keywords=("plywood", "5/8"), code="PT"),
            KeywordRule(keywords=("plywood",), code="PG"),
            KeywordRule(keywords=("osb", "7/16"), code="P"),
            KeywordRule(keywords=("osb",), code="E"),
        ),
        size_rules=(
            SizeRule(pattern=r"4\s*['x×]\s*10", unit_size=40.0),
            SizeRule(pattern=r"4\s*['x×]\s*9", unit_size=36.0),
            SizeRule(pattern=r"4\s*['x×]\s*8", unit_size=32.0),
        ),
        named_prices={
            "accessories": NamedPriceTable(prices=SHEATHING_ACCESSORY_PRICES, default=15.00),
        },
        labor_rate_per_hour=55.0,
    )


# =============================================================================
# ACOUSTICAL
# =============================================================================

# Cost per unit of grid and support components
ACOUSTICAL_GRID_PRICES: Dict[str, float] = {
    "Main Runner": 8.50,            # 12' length
    "Cross Tee 4'": 2.25,
    "Cross Tee 2'": 1.25,
    "Wall Molding": 4.50,           # 10' length
    "Hanger Wire": 0.85,
    "Carrying Channel": 0.95,       # per LF
    "Furring Channel": 0.75,        # per LF
    "Furring Strip": 0.55,          # per LF
    "Mounting Clip": 0.65,
}


def _acoustical_catalog() -> TradeCatalog:
    def ceiling(code, description, unit_size, cost, labor):
        return MaterialCatalogEntry(
            code=code,
            description=description,
            unit_size=unit_size,
            unit_cost=cost,
            labor_rate=labor,
            unit="SF",
        )

    return TradeCatalog(
        trade=Trade.ACOUSTICAL,
        entries=(
            ceiling("ACP", "2x4 Acoustical Ceiling Panel", 8.0, 3.25, 0.020),
            ceiling("ACT", "2x2 Acoustical Ceiling Tile", 4.0, 3.75, 0.022),
            ceiling("GYP", "Gypsum Board Ceiling", 32.0, 2.95, 0.035),
            ceiling("WOOD", "Wood Plank Ceiling", 4.0, 11.50, 0.060),
            ceiling("OPEN", "Open/Exposed Ceiling", 0.0, 0.0, 0.0),
            ceiling("DEFAULT", "2x2 Ceiling Tile", 4.0, 3.50, 0.022),
        ),
        default_code="DEFAULT",
        keyword_rules=(
            KeywordRule(keywords=("open",), code="OPEN"),
            KeywordRule(keywords=("exposed",), code="OPEN"),
            KeywordRule(keywords=("wood",), code="WOOD"),
            KeywordRule(keywords=("plank",), code="WOOD"),
            KeywordRule(keywords=("gyp",), code="GYP"),
            KeywordRule(keywords=("drywall",), code="GYP"),
            KeywordRule(keywords=("tile",), code="ACT"),
            KeywordRule(keywords=("panel",), code="ACP"),
            KeywordRule(keywords=("lay-in",), code="ACP"),
        ),
        size_rules=(
            SizeRule(pattern=r"2\s*'?\s*[x×]\s*4", unit_size=8.0, code="ACP"),
            SizeRule(pattern=r"2\s*'?\s*[x×]\s*2", unit_size=4.0, code="ACT"),
            SizeRule(pattern=r"4\s*'?\s*[x×]\s*8", unit_size=32.0, code="GYP"),
            SizeRule(pattern=r"6\s*(?:\"|in)\s*(?:wide\s*)?plank", unit_size=4.0),
            SizeRule(pattern=r"4\s*(?:\"|in)\s*(?:wide\s*)?plank", unit_size=2.67),
        ),
        named_prices={
            "grid": NamedPriceTable(prices=ACOUSTICAL_GRID_PRICES, default=1.00),
        },
        labor_rate_per_hour=62.0,
    )


# =============================================================================
# FRAMING
# =============================================================================

# Stud cost per piece and track cost per linear foot, by kind and size
FRAMING_SIZED_PRICES: Dict[str, Dict[str, float]] = {
    "metal stud": {'2-1/2"': 4.25, '3-5/8"': 5.25, '6"': 7.85},
    "wood stud": {"2x4": 4.50, "2x6": 6.75},
    "metal track": {'2-1/2"': 3.25, '3-5/8"': 3.75, '6"': 5.10},
    "wood track": {"2x4": 3.25, "2x6": 4.40},
}

FRAMING_TYPE_PRICES: Dict[str, float] = {
    "stud": 5.25,
    "track": 3.75,
}

FRAMING_ACCESSORY_PRICES: Dict[str, float] = {
    "Header": 28.00,
    "King Stud": 5.25,
    "Cripple Stud": 3.50,
    "Corner Backing": 6.00,
    "Blocking": 1.85,            # per LF
    "Screws": 15.00,             # box of 100
    "Nails": 12.00,              # box of 50 lb
}

# (stud type, description, size, material)
STUD_SPECS = {
    StudType.METAL_2_1_2: ('2-1/2" Metal Stud', '2-1/2"', "metal"),
    StudType.METAL_3_5_8: ('3-5/8" Metal Stud', '3-5/8"', "metal"),
    StudType.METAL_6: ('6" Metal Stud', '6"', "metal"),
    StudType.WOOD_2X4: ("2x4 Wood Stud", "2x4", "wood"),
    StudType.WOOD_2X6: ("2x6 Wood Stud", "2x6", "wood"),
}

_STUD_KEYWORD_RULES = (
    KeywordRule(keywords=("wood", "2x6"), code=StudType.WOOD_2X6.value),
    KeywordRule(keywords=("wood",), code=StudType.WOOD_2X4.value),
    KeywordRule(keywords=("metal", "2-1/2"), code=StudType.METAL_2_1_2.value),
    KeywordRule(keywords=("metal", "3-5/8"), code=StudType.METAL_3_5_8.value),
    KeywordRule(keywords=('6" metal',), code=StudType.METAL_6.value),
    KeywordRule(keywords=('6" stud',), code=StudType.METAL_6.value),
    KeywordRule(keywords=("metal",), code=StudType.METAL_3_5_8.value),
)

_STUD_SIZE_RULES = (
    SizeRule(pattern=r"2\s*x\s*6", code=StudType.WOOD_2X6.value),
    SizeRule(pattern=r"2\s*x\s*4", code=StudType.WOOD_2X4.value),
    SizeRule(pattern=r"2[-\s]1/2", code=StudType.METAL_2_1_2.value),
    SizeRule(pattern=r"3[-\s]5/8", code=StudType.METAL_3_5_8.value),
    SizeRule(pattern=r"(?<![\d/-])6\s*(?:\"|in)", code=StudType.METAL_6.value),
)

# Wall type numbers used on framing plans
WALL_CODE_ALIASES: Dict[str, str] = {
    "2": StudType.METAL_2_1_2.value,
    "6": StudType.METAL_6.value,
    "8": StudType.METAL_6.value,
    "12": StudType.WOOD_2X4.value,
    "14": StudType.WOOD_2X6.value,
}


def _stud_entries():
    return tuple(
        MaterialCatalogEntry(
            code=stud_type.value,
            description=description,
            unit_size=1.0,
            unit_cost=FRAMING_SIZED_PRICES[f"{material} stud"][size],
            labor_rate=0.02,
            unit="EA",
            material=material,
        )
        for stud_type, (description, size, material) in STUD_SPECS.items()
    )


def _framing_catalog() -> TradeCatalog:
    return TradeCatalog(
        trade=Trade.FRAMING,
        entries=_stud_entries(),
        default_code=StudType.METAL_3_5_8.value,
        keyword_rules=_STUD_KEYWORD_RULES,
        size_rules=_STUD_SIZE_RULES,
        code_aliases=WALL_CODE_ALIASES,
        sized_prices=FRAMING_SIZED_PRICES,
        type_prices=FRAMING_TYPE_PRICES,
        global_default_price=5.25,
        named_prices={
            "accessories": NamedPriceTable(prices=FRAMING_ACCESSORY_PRICES, default=5.00),
        },
        labor_rate_per_hour=65.0,
    )


# =============================================================================
# CARPENTRY
# =============================================================================

# Sheathing cost per square foot by kind and thickness
CARPENTRY_SHEATHING_PRICES: Dict[str, Dict[str, float]] = {
    "gypsum": {'1/2"': 0.55, '5/8"': 0.65},
    "plywood": {'1/2"': 1.35, '5/8"': 1.55, '3/4"': 1.85},
    "osb": {'7/16"': 0.80, '1/2"': 0.95},
    "cement board": {'1/2"': 2.25, '5/8"': 2.45},
}

CARPENTRY_SHEATHING_TYPE_PRICES: Dict[str, float] = {
    "sheathing": 0.65,
}

CARPENTRY_ACCESSORY_PRICES: Dict[str, float] = {
    "Fire-Rated Gypsum": 0.85,      # per SF
    "Fire Caulk": 12.50,            # 10.3 oz tube
    "Self-Drilling Screws": 15.00,  # box of 100
}

# Daily rental rate per unit
CARPENTRY_EQUIPMENT_RATES: Dict[str, float] = {
    "Screw Gun": 25.00,
    "Laser Level": 75.00,
    "Chop Saw": 45.00,
    "Caulking Gun": 10.00,
    "Hammer Drill": 35.00,
    "Scissor Lift": 150.00,
}

# Hourly rate by crew role
CARPENTRY_CREW_RATES: Dict[str, float] = {
    "Foreman": 75.00,
    "Journeyman": 65.00,
    "Apprentice": 45.00,
}


def _carpentry_catalog() -> TradeCatalog:
    sized = dict(FRAMING_SIZED_PRICES)
    sized.update(CARPENTRY_SHEATHING_PRICES)
    type_prices = dict(FRAMING_TYPE_PRICES)
    type_prices.update(CARPENTRY_SHEATHING_TYPE_PRICES)
    return TradeCatalog(
        trade=Trade.CARPENTRY,
        entries=_stud_entries(),
        default_code=StudType.METAL_3_5_8.value,
        keyword_rules=_STUD_KEYWORD_RULES,
        size_rules=_STUD_SIZE_RULES,
        code_aliases=WALL_CODE_ALIASES,
        sized_prices=sized,
        type_prices=type_prices,
        global_default_price=5.25,
        named_prices={
            "accessories": NamedPriceTable(prices=CARPENTRY_ACCESSORY_PRICES, default=15.00),
            "equipment": NamedPriceTable(prices=CARPENTRY_EQUIPMENT_RATES, default=25.00),
            "crew": NamedPriceTable(prices=CARPENTRY_CREW_RATES, default=65.00),
        },
        labor_rate_per_hour=65.0,
    )


# =============================================================================
# MECHANICAL
# =============================================================================


def _mechanical_catalog() -> TradeCatalog:
    def item(code, description, unit, cost, labor):
        return MaterialCatalogEntry(
            code=code,
            description=description,
            unit=unit,
            unit_cost=cost,
            labor_rate=labor,
        )

    return TradeCatalog(
        trade=Trade.MECHANICAL,
        entries=(
            item("HOOD", "Kitchen Exhaust Hood", "EA", 8500.00, 24.0),
            item("GREASE-DUCT", "Welded Grease Duct", "LF", 145.00, 1.5),
            item("EF", "Exhaust Fan", "EA", 2850.00, 8.0),
            item("MAU", "Makeup Air Unit", "EA", 9500.00, 16.0),
            item("RTU", "Rooftop Unit", "EA", 12500.00, 24.0),
            item("CURB", "Roof Curb", "EA", 650.00, 4.0),
            item("DUCT", "Galvanized Ductwork", "LF", 18.00, 0.35),
            item("FLEX", "Flexible Duct", "LF", 6.50, 0.15),
            item("DAMPER", "Fire/Smoke Damper", "EA", 485.00, 2.0),
            item("DIFFUSER", "Supply Diffuser", "EA", 85.00, 0.75),
            item("GRILLE", "Return Grille", "EA", 65.00, 0.5),
            item("INSULATION", "Duct Insulation", "SF", 2.25, 0.03),
            item("THERMOSTAT", "Thermostat / Controller", "EA", 350.00, 2.0),
            item("SENSOR", "Control Sensor", "EA", 185.00, 1.0),
            item("REFRIGERANT", "Refrigerant Piping", "LF", 22.00, 0.4),
            item("GAS", "Gas Piping", "LF", 14.50, 0.45),
            item("MISC", "Mechanical Material", "EA", 100.00, 1.0),
        ),
        default_code="MISC",
        keyword_rules=(
            KeywordRule(keywords=("grease", "duct"), code="GREASE-DUCT"),
            KeywordRule(keywords=("hood",), code="HOOD"),
            KeywordRule(keywords=("makeup air",), code="MAU"),
            KeywordRule(keywords=("make-up air",), code="MAU"),
            KeywordRule(keywords=("rooftop unit",), code="RTU"),
            KeywordRule(keywords=("rtu",), code="RTU"),
            KeywordRule(keywords=("curb",), code="CURB"),
            KeywordRule(keywords=("exhaust fan",), code="EF"),
            KeywordRule(keywords=("flex",), code="FLEX"),
            KeywordRule(keywords=("insulation",), code="INSULATION"),
            KeywordRule(keywords=("damper",), code="DAMPER"),
            KeywordRule(keywords=("diffuser",), code="DIFFUSER"),
            KeywordRule(keywords=("register",), code="DIFFUSER"),
            KeywordRule(keywords=("grille",), code="GRILLE"),
            KeywordRule(keywords=("duct",), code="DUCT"),
            KeywordRule(keywords=("thermostat",), code="THERMOSTAT"),
            KeywordRule(keywords=("controller",), code="THERMOSTAT"),
            KeywordRule(keywords=("sensor",), code="SENSOR"),
            KeywordRule(keywords=("refrigerant",), code="REFRIGERANT"),
            KeywordRule(keywords=("gas",), code="GAS"),
        ),
        labor_rate_per_hour=95.0,
    )


# =============================================================================
# DEFAULT CATALOG
# =============================================================================


def build_default_catalog() -> MaterialCatalog:
    """Build the default catalog covering every trade."""
    return MaterialCatalog(
        trades={
            Trade.PLUMBING: _plumbing_catalog(),
            Trade.SHEATHING: _sheathing_catalog(),
            Trade.ACOUSTICAL: _acoustical_catalog(),
            Trade.FRAMING: _framing_catalog(),
            Trade.CARPENTRY: _carpentry_catalog(),
            Trade.MECHANICAL: _mechanical_catalog(),
        }
    )


DEFAULT_CATALOG = build_default_catalog()

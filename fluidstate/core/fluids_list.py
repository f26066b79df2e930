"""Registry of fluids known to the CoolProp backends.

Each member of :class:`FluidsList` carries a :class:`FluidInfo` record with
the CoolProp name, the backend that evaluates it and, for incompressible
binary mixtures, the mixture type and the allowed fraction range (decimal
fractions). Members that share the same record (e.g. ``R729`` and ``Air``)
are aliases of one another.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import NamedTuple

logger = logging.getLogger(__name__)


class Mix(Enum):
    """How the fraction of an incompressible binary mixture is defined."""

    MASS = "mass"
    VOLUME = "volume"


class FluidInfo(NamedTuple):
    """Static description of a registry entry."""

    coolprop_name: str
    backend: str = "HEOS"
    pure: bool = True
    mix_type: Mix = Mix.MASS
    fraction_min: float = 0.0
    fraction_max: float = 1.0


class FluidsList(Enum):
    """CoolProp pure and pseudo-pure fluids, incompressibles and predefined mixtures."""

    # --- Pure and pseudo-pure fluids ---
    Acetone = FluidInfo("Acetone")
    Air = FluidInfo("Air")
    R729 = FluidInfo("Air")
    Ammonia = FluidInfo("Ammonia")
    R717 = FluidInfo("Ammonia")
    Argon = FluidInfo("Argon")
    R740 = FluidInfo("Argon")
    Benzene = FluidInfo("Benzene")
    Butene = FluidInfo("1-Butene")
    CarbonDioxide = FluidInfo("CarbonDioxide")
    R744 = FluidInfo("CarbonDioxide")
    CarbonMonoxide = FluidInfo("CarbonMonoxide")
    CarbonylSulfide = FluidInfo("CarbonylSulfide")
    cis2Butene = FluidInfo("cis-2-Butene")
    CycloHexane = FluidInfo("CycloHexane")
    CycloPentane = FluidInfo("CycloPentane")
    CycloPropane = FluidInfo("CycloPropane")
    D4 = FluidInfo("D4")
    D5 = FluidInfo("D5")
    D6 = FluidInfo("D6")
    Deuterium = FluidInfo("Deuterium")
    Dichloroethane = FluidInfo("Dichloroethane")
    DiethylEther = FluidInfo("DiethylEther")
    DimethylCarbonate = FluidInfo("DimethylCarbonate")
    DimethylEther = FluidInfo("DimethylEther")
    Ethane = FluidInfo("Ethane")
    R170 = FluidInfo("Ethane")
    Ethanol = FluidInfo("Ethanol")
    EthylBenzene = FluidInfo("EthylBenzene")
    Ethylene = FluidInfo("Ethylene")
    R1150 = FluidInfo("Ethylene")
    EthyleneOxide = FluidInfo("EthyleneOxide")
    Fluorine = FluidInfo("Fluorine")
    HeavyWater = FluidInfo("HeavyWater")
    Helium = FluidInfo("Helium")
    R704 = FluidInfo("Helium")
    HFE143m = FluidInfo("HFE143m")
    RE143a = FluidInfo("HFE143m")
    Hydrogen = FluidInfo("Hydrogen")
    R702 = FluidInfo("Hydrogen")
    HydrogenChloride = FluidInfo("HydrogenChloride")
    HydrogenSulfide = FluidInfo("HydrogenSulfide")
    IsoButane = FluidInfo("IsoButane")
    R600a = FluidInfo("IsoButane")
    IsoButene = FluidInfo("IsoButene")
    Isohexane = FluidInfo("Isohexane")
    Isopentane = FluidInfo("Isopentane")
    R601a = FluidInfo("Isopentane")
    Krypton = FluidInfo("Krypton")
    MD2M = FluidInfo("MD2M")
    MD3M = FluidInfo("MD3M")
    MD4M = FluidInfo("MD4M")
    MDM = FluidInfo("MDM")
    Methane = FluidInfo("Methane")
    R50 = FluidInfo("Methane")
    Methanol = FluidInfo("Methanol")
    MethylLinoleate = FluidInfo("MethylLinoleate")
    MethylLinolenate = FluidInfo("MethylLinolenate")
    MethylOleate = FluidInfo("MethylOleate")
    MethylPalmitate = FluidInfo("MethylPalmitate")
    MethylStearate = FluidInfo("MethylStearate")
    MM = FluidInfo("MM")
    mXylene = FluidInfo("m-Xylene")
    nButane = FluidInfo("n-Butane")
    R600 = FluidInfo("n-Butane")
    nDecane = FluidInfo("n-Decane")
    nDodecane = FluidInfo("n-Dodecane")
    Neon = FluidInfo("Neon")
    R720 = FluidInfo("Neon")
    Neopentane = FluidInfo("Neopentane")
    nHeptane = FluidInfo("n-Heptane")
    nHexane = FluidInfo("n-Hexane")
    Nitrogen = FluidInfo("Nitrogen")
    R728 = FluidInfo("Nitrogen")
    NitrousOxide = FluidInfo("NitrousOxide")
    nNonane = FluidInfo("n-Nonane")
    nOctane = FluidInfo("n-Octane")
    Novec649 = FluidInfo("Novec649")
    nPentane = FluidInfo("n-Pentane")
    R601 = FluidInfo("n-Pentane")
    nPropane = FluidInfo("n-Propane")
    R290 = FluidInfo("n-Propane")
    nUndecane = FluidInfo("n-Undecane")
    OrthoDeuterium = FluidInfo("OrthoDeuterium")
    OrthoHydrogen = FluidInfo("OrthoHydrogen")
    Oxygen = FluidInfo("Oxygen")
    R732 = FluidInfo("Oxygen")
    oXylene = FluidInfo("o-Xylene")
    ParaDeuterium = FluidInfo("ParaDeuterium")
    ParaHydrogen = FluidInfo("ParaHydrogen")
    Propylene = FluidInfo("Propylene")
    R1270 = FluidInfo("Propylene")
    Propyne = FluidInfo("Propyne")
    pXylene = FluidInfo("p-Xylene")
    R11 = FluidInfo("R11")
    R113 = FluidInfo("R113")
    R114 = FluidInfo("R114")
    R115 = FluidInfo("R115")
    R116 = FluidInfo("R116")
    R12 = FluidInfo("R12")
    R123 = FluidInfo("R123")
    R1233zdE = FluidInfo("R1233zd(E)")
    R1234yf = FluidInfo("R1234yf")
    R1234zeE = FluidInfo("R1234ze(E)")
    R1234zeZ = FluidInfo("R1234ze(Z)")
    R124 = FluidInfo("R124")
    R1243zf = FluidInfo("R1243zf")
    R125 = FluidInfo("R125")
    R13 = FluidInfo("R13")
    R1336mzzE = FluidInfo("R1336mzz(E)")
    R134a = FluidInfo("R134a")
    R13I1 = FluidInfo("R13I1")
    R14 = FluidInfo("R14")
    R141b = FluidInfo("R141b")
    R142b = FluidInfo("R142b")
    R143a = FluidInfo("R143a")
    R152a = FluidInfo("R152A")
    R161 = FluidInfo("R161")
    R21 = FluidInfo("R21")
    R218 = FluidInfo("R218")
    R22 = FluidInfo("R22")
    R227ea = FluidInfo("R227ea")
    R23 = FluidInfo("R23")
    R236ea = FluidInfo("R236ea")
    R236fa = FluidInfo("R236fa")
    R245ca = FluidInfo("R245ca")
    R245fa = FluidInfo("R245fa")
    R32 = FluidInfo("R32")
    R365mfc = FluidInfo("R365mfc")
    R40 = FluidInfo("R40")
    R404A = FluidInfo("R404A")
    R407C = FluidInfo("R407C")
    R41 = FluidInfo("R41")
    R410A = FluidInfo("R410A")
    R507A = FluidInfo("R507A")
    RC318 = FluidInfo("RC318")
    SES36 = FluidInfo("SES36")
    SulfurDioxide = FluidInfo("SulfurDioxide")
    R764 = FluidInfo("SulfurDioxide")
    SulfurHexafluoride = FluidInfo("SulfurHexafluoride")
    R846 = FluidInfo("SulfurHexafluoride")
    Toluene = FluidInfo("Toluene")
    trans2Butene = FluidInfo("trans-2-Butene")
    Water = FluidInfo("Water")
    R718 = FluidInfo("Water")
    Xenon = FluidInfo("Xenon")

    # --- Incompressible pure fluids ---
    AS10 = FluidInfo("AS10", "INCOMP")
    AS20 = FluidInfo("AS20", "INCOMP")
    AS30 = FluidInfo("AS30", "INCOMP")
    AS40 = FluidInfo("AS40", "INCOMP")
    AS55 = FluidInfo("AS55", "INCOMP")
    DEB = FluidInfo("DEB", "INCOMP")
    DowJ = FluidInfo("DowJ", "INCOMP")
    DowJ2 = FluidInfo("DowJ2", "INCOMP")
    DowQ = FluidInfo("DowQ", "INCOMP")
    DowQ2 = FluidInfo("DowQ2", "INCOMP")
    DSF = FluidInfo("DSF", "INCOMP")
    HC10 = FluidInfo("HC10", "INCOMP")
    HC20 = FluidInfo("HC20", "INCOMP")
    HC30 = FluidInfo("HC30", "INCOMP")
    HC40 = FluidInfo("HC40", "INCOMP")
    HC50 = FluidInfo("HC50", "INCOMP")
    HCB = FluidInfo("HCB", "INCOMP")
    HCM = FluidInfo("HCM", "INCOMP")
    HFE = FluidInfo("HFE", "INCOMP")
    HFE2 = FluidInfo("HFE2", "INCOMP")
    HY20 = FluidInfo("HY20", "INCOMP")
    HY30 = FluidInfo("HY30", "INCOMP")
    HY40 = FluidInfo("HY40", "INCOMP")
    HY45 = FluidInfo("HY45", "INCOMP")
    HY50 = FluidInfo("HY50", "INCOMP")
    NaK = FluidInfo("NaK", "INCOMP")
    NBS = FluidInfo("NBS", "INCOMP")
    PBB = FluidInfo("PBB", "INCOMP")
    PCL = FluidInfo("PCL", "INCOMP")
    PCR = FluidInfo("PCR", "INCOMP")
    PGLT = FluidInfo("PGLT", "INCOMP")
    PHE = FluidInfo("PHE", "INCOMP")
    PHR = FluidInfo("PHR", "INCOMP")
    PLR = FluidInfo("PLR", "INCOMP")
    PMR = FluidInfo("PMR", "INCOMP")
    PMS1 = FluidInfo("PMS1", "INCOMP")
    PMS2 = FluidInfo("PMS2", "INCOMP")
    PNF = FluidInfo("PNF", "INCOMP")
    PNF2 = FluidInfo("PNF2", "INCOMP")
    S800 = FluidInfo("S800", "INCOMP")
    SAB = FluidInfo("SAB", "INCOMP")
    T66 = FluidInfo("T66", "INCOMP")
    T72 = FluidInfo("T72", "INCOMP")
    TCO = FluidInfo("TCO", "INCOMP")
    TD12 = FluidInfo("TD12", "INCOMP")
    TVP1 = FluidInfo("TVP1", "INCOMP")
    TVP1869 = FluidInfo("TVP1869", "INCOMP")
    TX22 = FluidInfo("TX22", "INCOMP")
    TY10 = FluidInfo("TY10", "INCOMP")
    TY15 = FluidInfo("TY15", "INCOMP")
    TY20 = FluidInfo("TY20", "INCOMP")
    TY24 = FluidInfo("TY24", "INCOMP")
    WaterIncomp = FluidInfo("Water", "INCOMP")
    XLT = FluidInfo("XLT", "INCOMP")
    XLT2 = FluidInfo("XLT2", "INCOMP")
    ZS10 = FluidInfo("ZS10", "INCOMP")
    ZS25 = FluidInfo("ZS25", "INCOMP")
    ZS40 = FluidInfo("ZS40", "INCOMP")
    ZS45 = FluidInfo("ZS45", "INCOMP")
    ZS55 = FluidInfo("ZS55", "INCOMP")

    # --- Incompressible binary mixtures (mass-based) ---
    FRE = FluidInfo("FRE", "INCOMP", False, Mix.MASS, 0.19, 0.5)
    IceEA = FluidInfo("IceEA", "INCOMP", False, Mix.MASS, 0.05, 0.35)
    IceNA = FluidInfo("IceNA", "INCOMP", False, Mix.MASS, 0.05, 0.35)
    IcePG = FluidInfo("IcePG", "INCOMP", False, Mix.MASS, 0.05, 0.35)
    LiBr = FluidInfo("LiBr", "INCOMP", False, Mix.MASS, 0, 0.75)
    MAM = FluidInfo("MAM", "INCOMP", False, Mix.MASS, 0, 0.3)
    MAM2 = FluidInfo("MAM2", "INCOMP", False, Mix.MASS, 0.078, 0.236)
    MCA = FluidInfo("MCA", "INCOMP", False, Mix.MASS, 0, 0.3)
    MCA2 = FluidInfo("MCA2", "INCOMP", False, Mix.MASS, 0.09, 0.294)
    MEA = FluidInfo("MEA", "INCOMP", False, Mix.MASS, 0, 0.6)
    MEA2 = FluidInfo("MEA2", "INCOMP", False, Mix.MASS, 0.11, 0.6)
    MEG = FluidInfo("MEG", "INCOMP", False, Mix.MASS, 0, 0.6)
    MEG2 = FluidInfo("MEG2", "INCOMP", False, Mix.MASS, 0, 0.56)
    MGL = FluidInfo("MGL", "INCOMP", False, Mix.MASS, 0, 0.6)
    MGL2 = FluidInfo("MGL2", "INCOMP", False, Mix.MASS, 0.195, 0.63)
    MITSW = FluidInfo("MITSW", "INCOMP", False, Mix.MASS, 0, 0.12)
    MKA = FluidInfo("MKA", "INCOMP", False, Mix.MASS, 0, 0.45)
    MKA2 = FluidInfo("MKA2", "INCOMP", False, Mix.MASS, 0.11, 0.41)
    MKC = FluidInfo("MKC", "INCOMP", False, Mix.MASS, 0, 0.4)
    MKC2 = FluidInfo("MKC2", "INCOMP", False, Mix.MASS, 0, 0.39)
    MKF = FluidInfo("MKF", "INCOMP", False, Mix.MASS, 0, 0.48)
    MLI = FluidInfo("MLI", "INCOMP", False, Mix.MASS, 0, 0.24)
    MMA = FluidInfo("MMA", "INCOMP", False, Mix.MASS, 0, 0.6)
    MMA2 = FluidInfo("MMA2", "INCOMP", False, Mix.MASS, 0.078, 0.474)
    MMG = FluidInfo("MMG", "INCOMP", False, Mix.MASS, 0, 0.3)
    MMG2 = FluidInfo("MMG2", "INCOMP", False, Mix.MASS, 0, 0.205)
    MNA = FluidInfo("MNA", "INCOMP", False, Mix.MASS, 0, 0.23)
    MNA2 = FluidInfo("MNA2", "INCOMP", False, Mix.MASS, 0, 0.23)
    MPG = FluidInfo("MPG", "INCOMP", False, Mix.MASS, 0, 0.6)
    MPG2 = FluidInfo("MPG2", "INCOMP", False, Mix.MASS, 0.15, 0.57)
    VCA = FluidInfo("VCA", "INCOMP", False, Mix.MASS, 0.147, 0.299)
    VKC = FluidInfo("VKC", "INCOMP", False, Mix.MASS, 0.128, 0.389)
    VMA = FluidInfo("VMA", "INCOMP", False, Mix.MASS, 0.1, 0.9)
    VMG = FluidInfo("VMG", "INCOMP", False, Mix.MASS, 0.072, 0.206)
    VNA = FluidInfo("VNA", "INCOMP", False, Mix.MASS, 0.07, 0.231)

    # --- Incompressible binary mixtures (volume-based) ---
    AEG = FluidInfo("AEG", "INCOMP", False, Mix.VOLUME, 0.1, 0.6)
    AKF = FluidInfo("AKF", "INCOMP", False, Mix.VOLUME, 0.4)
    AL = FluidInfo("AL", "INCOMP", False, Mix.VOLUME, 0.1, 0.6)
    AN = FluidInfo("AN", "INCOMP", False, Mix.VOLUME, 0.1, 0.6)
    APG = FluidInfo("APG", "INCOMP", False, Mix.VOLUME, 0.1, 0.6)
    GKN = FluidInfo("GKN", "INCOMP", False, Mix.VOLUME, 0.1, 0.6)
    PK2 = FluidInfo("PK2", "INCOMP", False, Mix.VOLUME, 0.3)
    PKL = FluidInfo("PKL", "INCOMP", False, Mix.VOLUME, 0.1, 0.6)
    ZAC = FluidInfo("ZAC", "INCOMP", False, Mix.VOLUME, 0.06, 0.5)
    ZFC = FluidInfo("ZFC", "INCOMP", False, Mix.VOLUME, 0.3, 0.6)
    ZLC = FluidInfo("ZLC", "INCOMP", False, Mix.VOLUME, 0.3, 0.7)
    ZM = FluidInfo("ZM", "INCOMP", False, Mix.VOLUME)
    ZMC = FluidInfo("ZMC", "INCOMP", False, Mix.VOLUME, 0.3, 0.7)

    # --- Predefined mixtures ---
    AirMix = FluidInfo("Air.mix")
    Amarillo = FluidInfo("Amarillo.mix")
    Ekofisk = FluidInfo("Ekofisk.mix")
    GulfCoast = FluidInfo("GulfCoast.mix")
    GulfCoastGasNIST = FluidInfo("GulfCoastGas(NIST1).mix")
    HighCO2 = FluidInfo("HighCO2.mix")
    HighN2 = FluidInfo("HighN2.mix")
    NaturalGasSample = FluidInfo("NaturalGasSample.mix")
    R401A = FluidInfo("R401A.mix")
    R401B = FluidInfo("R401B.mix")
    R401C = FluidInfo("R401C.mix")
    R402A = FluidInfo("R402A.mix")
    R402B = FluidInfo("R402B.mix")
    R403A = FluidInfo("R403A.mix")
    R403B = FluidInfo("R403B.mix")
    R404AMix = FluidInfo("R404A.mix")
    R405A = FluidInfo("R405A.mix")
    R406A = FluidInfo("R406A.mix")
    R407A = FluidInfo("R407A.mix")
    R407B = FluidInfo("R407B.mix")
    R407CMix = FluidInfo("R407C.mix")
    R407D = FluidInfo("R407D.mix")
    R407E = FluidInfo("R407E.mix")
    R407F = FluidInfo("R407F.mix")
    R408A = FluidInfo("R408A.mix")
    R409A = FluidInfo("R409A.mix")
    R409B = FluidInfo("R409B.mix")
    R410AMix = FluidInfo("R410A.mix")
    R410B = FluidInfo("R410B.mix")
    R411A = FluidInfo("R411A.mix")
    R411B = FluidInfo("R411B.mix")
    R412A = FluidInfo("R412A.mix")
    R413A = FluidInfo("R413A.mix")
    R414A = FluidInfo("R414A.mix")
    R414B = FluidInfo("R414B.mix")
    R415A = FluidInfo("R415A.mix")
    R415B = FluidInfo("R415B.mix")
    R416A = FluidInfo("R416A.mix")
    R417A = FluidInfo("R417A.mix")
    R417B = FluidInfo("R417B.mix")
    R417C = FluidInfo("R417C.mix")
    R418A = FluidInfo("R418A.mix")
    R419A = FluidInfo("R419A.mix")
    R419B = FluidInfo("R419B.mix")
    R420A = FluidInfo("R420A.mix")
    R421A = FluidInfo("R421A.mix")
    R421B = FluidInfo("R421B.mix")
    R422A = FluidInfo("R422A.mix")
    R422B = FluidInfo("R422B.mix")
    R422C = FluidInfo("R422C.mix")
    R422D = FluidInfo("R422D.mix")
    R422E = FluidInfo("R422E.mix")
    R423A = FluidInfo("R423A.mix")
    R424A = FluidInfo("R424A.mix")
    R425A = FluidInfo("R425A.mix")
    R426A = FluidInfo("R426A.mix")
    R427A = FluidInfo("R427A.mix")
    R428A = FluidInfo("R428A.mix")
    R429A = FluidInfo("R429A.mix")
    R430A = FluidInfo("R430A.mix")
    R431A = FluidInfo("R431A.mix")
    R432A = FluidInfo("R432A.mix")
    R433A = FluidInfo("R433A.mix")
    R433B = FluidInfo("R433B.mix")
    R433C = FluidInfo("R433C.mix")
    R434A = FluidInfo("R434A.mix")
    R435A = FluidInfo("R435A.mix")
    R436A = FluidInfo("R436A.mix")
    R436B = FluidInfo("R436B.mix")
    R437A = FluidInfo("R437A.mix")
    R438A = FluidInfo("R438A.mix")
    R439A = FluidInfo("R439A.mix")
    R440A = FluidInfo("R440A.mix")
    R441A = FluidInfo("R441A.mix")
    R442A = FluidInfo("R442A.mix")
    R443A = FluidInfo("R443A.mix")
    R444A = FluidInfo("R444A.mix")
    R444B = FluidInfo("R444B.mix")
    R445A = FluidInfo("R445A.mix")
    R446A = FluidInfo("R446A.mix")
    R447A = FluidInfo("R447A.mix")
    R448A = FluidInfo("R448A.mix")
    R449A = FluidInfo("R449A.mix")
    R449B = FluidInfo("R449B.mix")
    R450A = FluidInfo("R450A.mix")
    R451A = FluidInfo("R451A.mix")
    R451B = FluidInfo("R451B.mix")
    R452A = FluidInfo("R452A.mix")
    R453A = FluidInfo("R453A.mix")
    R454A = FluidInfo("R454A.mix")
    R454B = FluidInfo("R454B.mix")
    R500 = FluidInfo("R500.mix")
    R501 = FluidInfo("R501.mix")
    R502 = FluidInfo("R502.mix")
    R503 = FluidInfo("R503.mix")
    R504 = FluidInfo("R504.mix")
    R507AMix = FluidInfo("R507A.mix")
    R508A = FluidInfo("R508A.mix")
    R508B = FluidInfo("R508B.mix")
    R509A = FluidInfo("R509A.mix")
    R510A = FluidInfo("R510A.mix")
    R511A = FluidInfo("R511A.mix")
    R512A = FluidInfo("R512A.mix")
    R513A = FluidInfo("R513A.mix")
    TypicalNaturalGas = FluidInfo("TypicalNaturalGas.mix")

    @property
    def coolprop_name(self) -> str:
        return self.value.coolprop_name

    @property
    def backend(self) -> str:
        return self.value.backend

    @property
    def pure(self) -> bool:
        return self.value.pure

    @property
    def mix_type(self) -> Mix:
        return self.value.mix_type

    @property
    def fraction_min(self) -> float:
        return self.value.fraction_min

    @property
    def fraction_max(self) -> float:
        return self.value.fraction_max


def list_fluids(pure: bool | None = None, backend: str | None = None) -> list[FluidsList]:
    """Return registry entries, optionally filtered.

    Args:
        pure: Keep only pure (True) or only binary-mixture (False) entries.
        backend: Keep only entries evaluated by this CoolProp backend.

    Returns:
        Canonical members in declaration order (aliases are skipped).
    """
    fluids = list(FluidsList)
    if pure is not None:
        fluids = [f for f in fluids if f.pure is pure]
    if backend is not None:
        fluids = [f for f in fluids if f.backend.upper() == backend.upper()]
    return fluids


def get_fluid_info(name: str | FluidsList) -> FluidsList:
    """Look up a registry entry by member name, case-insensitively.

    Args:
        name: Member name (e.g. "water", "R134a", "MPG") or a member.

    Raises:
        KeyError: If no entry matches.
    """
    if isinstance(name, FluidsList):
        return name
    try:
        return FluidsList[name]
    except KeyError:
        pass
    key = name.strip().lower()
    for member_name, member in FluidsList.__members__.items():
        if member_name.lower() == key:
            return member
    logger.debug("Unknown fluid requested: %s", name)
    raise KeyError(f"Unknown fluid '{name}'. Use 'fluidstate info fluids' to list them.")

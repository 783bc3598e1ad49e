"""Runtime/default constants for typers, mappers, IO and execution settings."""

# Ligand IO
IO_SUPPORTED_LIGAND_EXTENSIONS = [".sdf", ".mol2", ".mol", ".pdb"]

# Element typer: atomic numbers >= this value share category 0
DEFAULT_MAX_ELEMENT = 84

# Mapper naming
CATCHALL_TYPE_NAME = "Other"
MAPPED_NAME_SEPARATOR = "_"
UNMAPPED_TYPE = -1

# Partial charges
CHARGE_METHODS = ("gasteiger", "mmff94", "none")
DEFAULT_CHARGE_METHOD = "gasteiger"
# Atom properties searched (in order) for a partial charge
PARTIAL_CHARGE_PROP = "_PartialCharge"
PARTIAL_CHARGE_PROPS = (PARTIAL_CHARGE_PROP, "_GasteigerCharge", "_TriposPartialCharge")

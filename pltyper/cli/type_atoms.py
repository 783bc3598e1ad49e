#!/usr/bin/env python
"""
Type the atoms of molecule files with a pltyper typer.

Supports SDF (every record), MOL2, MOL and PDB files as well as SMILES strings.
Without --output_dir a per-atom table is printed; with it, one .pt file is
written per molecule holding the typed atoms as torch tensors.

Usage:
    pltyper-type ligand.sdf
    pltyper-type ligand.sdf --typer element --max_element 36
    pltyper-type ligands/*.sdf --map_file reduced.types --output_dir /data/typed
    pltyper-type "CC(=O)Oc1ccccc1C(=O)O" --typer gnina-vector --add_hydrogens
    pltyper-type --typer gnina --map_file reduced.types --list_types
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

import torch
from tqdm import tqdm
from rdkit import RDLogger

from pltyper.atoms import assign_partial_charges, element_symbol
from pltyper.constants import CHARGE_METHODS, DEFAULT_CHARGE_METHOD
from pltyper.errors import PltyperError
from pltyper.featurize import type_molecule, vectorize_molecule
from pltyper.io import load_molecules
from pltyper.specs import TYPER_SPECS, build_typer, normalize_typer_name

# Suppress RDKit warnings
RDLogger.DisableLog('rdApp.*')

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Type molecule atoms for grid featurization")
    parser.add_argument(
        'inputs', nargs='*',
        help='Molecule files (SDF, MOL2, MOL, PDB) or SMILES strings'
    )
    parser.add_argument(
        '--typer', type=str, default='gnina', choices=list(TYPER_SPECS),
        help='Typer to use (default: gnina)'
    )
    parser.add_argument(
        '--covalent', action='store_true',
        help='Report covalent radii instead of XS radii (gnina typers)'
    )
    parser.add_argument(
        '--strict', action='store_true',
        help='Fail on elements without a gnina type instead of using GenericMetal'
    )
    parser.add_argument(
        '--max_element', type=int, default=None,
        help='Number of element types (element typer)'
    )
    parser.add_argument(
        '--map_file', type=str, default=None,
        help='Mapping file grouping type names, one new type per line'
    )
    parser.add_argument(
        '--add_hydrogens', action='store_true',
        help='Add explicit hydrogens before typing'
    )
    parser.add_argument(
        '--charge_method', type=str, default=DEFAULT_CHARGE_METHOD, choices=list(CHARGE_METHODS),
        help=f'Partial charge method (default: {DEFAULT_CHARGE_METHOD})'
    )
    parser.add_argument(
        '--output_dir', type=str, default=None,
        help='Write one .pt file per molecule instead of printing'
    )
    parser.add_argument(
        '--list_types', action='store_true',
        help='Print the type names of the configured typer and exit'
    )
    return parser.parse_args(argv)


def print_typed(name: str, mol, result: dict) -> None:
    names = result["type_names"]
    print(f"# {name}")
    for atom in mol.GetAtoms():
        idx = atom.GetIdx()
        symbol = element_symbol(atom.GetAtomicNum())
        radius = float(result["radii"][idx])
        if "types" in result:
            t = int(result["types"][idx])
            label = names[t] if 0 <= t < len(names) else "unmapped"
            print(f"{idx}\t{symbol}\t{t}\t{label}\t{radius:.3f}")
        else:
            values = " ".join(f"{v:g}" for v in result["features"][idx])
            print(f"{idx}\t{symbol}\t{radius:.3f}\t{values}")


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s | %(levelname)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    args = parse_args(argv)

    try:
        typer = build_typer(
            args.typer,
            map_file=args.map_file,
            use_covalent=args.covalent,
            strict=args.strict,
            max_element=args.max_element,
        )
    except PltyperError as e:
        logger.error(f"Failed to build typer: {e}")
        return 2

    if args.list_types:
        for i, name in enumerate(typer.get_type_names()):
            print(f"{i}\t{name}")
        return 0

    if not args.inputs:
        logger.error("No inputs given")
        return 2

    is_vector = TYPER_SPECS[normalize_typer_name(args.typer)].kind == "vector"
    logger.info(f"Typer: {args.typer} ({typer.num_types()} types), map_file={args.map_file}")

    output_dir = Path(args.output_dir) if args.output_dir else None
    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)

    success_count = 0
    failed = []
    start_time = time.time()

    for i, source in enumerate(tqdm(args.inputs, desc="Typing", unit="input", disable=output_dir is None)):
        stem = Path(source).stem if Path(source).exists() else f"mol_{i}"
        try:
            for k, mol in enumerate(load_molecules(source, add_hs=args.add_hydrogens)):
                assign_partial_charges(mol, args.charge_method)
                if is_vector:
                    result = vectorize_molecule(mol, typer, as_tensor=output_dir is not None)
                else:
                    result = type_molecule(mol, typer, as_tensor=output_dir is not None)

                name = f"{stem}_{k}"
                if output_dir is None:
                    print_typed(name, mol, result)
                else:
                    torch.save(result, output_dir / f"{name}.pt")
                success_count += 1
        except PltyperError as e:
            logger.warning(f"Failed to type {source}: {e}")
            failed.append((source, str(e)))

    elapsed = time.time() - start_time
    logger.info(f"Typed {success_count} molecules in {elapsed:.1f}s, {len(failed)} inputs failed")
    for source, error in failed[:20]:
        logger.info(f"  {source}: {error[:80]}")
    if len(failed) > 20:
        logger.info(f"  ... and {len(failed) - 20} more")

    return 1 if failed else 0


if __name__ == '__main__':
    sys.exit(main())

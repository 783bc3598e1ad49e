"""Quick validation script for typer output dimensionality."""

from pathlib import Path

from rdkit import Chem

from pltyper import (
    ElementIndexTyper,
    FileAtomMapper,
    GninaIndexTyper,
    GninaVectorTyper,
    MappedAtomIndexTyper,
    assign_partial_charges,
    type_molecule,
    vectorize_molecule,
)

MAP_FILE = Path(__file__).with_name("reduced.types")


def main() -> None:
    smiles_list = [
        "CCO",
        "c1ccccc1",
        "CC(=O)Oc1ccccc1C(=O)O",
    ]

    gnina = GninaIndexTyper()
    typers = {
        "gnina": gnina,
        "element": ElementIndexTyper(),
        "reduced": MappedAtomIndexTyper(FileAtomMapper(MAP_FILE, gnina.get_type_names()), gnina),
    }
    vector_typer = GninaVectorTyper()

    for smiles in smiles_list:
        mol = Chem.MolFromSmiles(smiles)
        if mol is None:
            print(f"Failed to parse SMILES: {smiles}")
            continue
        mol = assign_partial_charges(Chem.AddHs(mol))

        for name, typer in typers.items():
            result = type_molecule(mol, typer)
            print(
                f"{smiles} [{name}] -> types {tuple(result['types'].shape)} "
                f"in [0, {typer.num_types()}), max {result['types'].max()}"
            )
        vec = vectorize_molecule(mol, vector_typer)
        print(f"{smiles} [gnina-vector] -> features {tuple(vec['features'].shape)}")


if __name__ == "__main__":
    main()

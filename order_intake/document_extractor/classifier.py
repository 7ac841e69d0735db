"""
Package-type classifier for cargo descriptions.

Maps free-text package wording (German, English, Lithuanian order forms) to
the canonical PackageType codes by case-insensitive substring lookup. The
table is ordered: "EW-Paletten" must be checked before "Paletten", and the
Euro-pallet spellings before the generic "Pallet".
"""

from order_intake.schemas.order import PackageType

PACKAGE_TYPE_TABLE: tuple[tuple[str, PackageType], ...] = (
    ("EW-Paletten", PackageType.PALLET_OTHER),
    ("EPAL", PackageType.EPAL),
    ("EUR", PackageType.EPAL),
    ("Euro", PackageType.EPAL),
    ("Pallet", PackageType.PALLET),
    ("Paletten", PackageType.PALLET),
    ("Ladung", PackageType.CARTON),
    ("Karton", PackageType.CARTON),
    ("Carton", PackageType.CARTON),
    ("Stück", PackageType.OTHER),
    ("Pcs", PackageType.OTHER),
    ("Pieces", PackageType.OTHER),
    ("Other", PackageType.OTHER),
    ("GITTER", PackageType.OTHER),
    ("Box", PackageType.OTHER),
)


class PackageClassifier:
    """Classifies a cargo description into a canonical package type."""

    def __init__(self, table: tuple[tuple[str, PackageType], ...] = PACKAGE_TYPE_TABLE):
        self.table = tuple((key.casefold(), code) for key, code in table)

    def classify(self, description: str) -> PackageType:
        """Return the code of the first table key found in the description.

        Args:
            description: Free-text cargo description, e.g. "20 Euro-Pallets".

        Returns:
            The matching PackageType, or PackageType.OTHER if nothing matches.
        """
        haystack = description.casefold()
        for key, code in self.table:
            if key in haystack:
                return code
        return PackageType.OTHER

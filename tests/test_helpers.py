import os


FIXED_MHD = """ObjectType = Image
NDims = 3
DimSize = 10 20 30
ElementType = MET_SHORT
Offset = 10 20 30
ElementSpacing = 0.5 1 2
Orientation = 1 0 0 0 1 0 0 0 1
ElementDataFile = fixed.raw
"""


def write_file(folder: str, name: str, text: str) -> str:
    path = os.path.join(folder, name)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w") as f:
        f.write(text)
    return path


def point_record(index, fixed, moving, manual=1, unsure=0, guesses=False):
    """Lines of one Point_<n> record; ``guesses`` adds SystemGuess tokens."""
    prefix = f"Point_{index:02d}->"
    lines = [
        f"{prefix}Distinctiveness=0.75",
        f"{prefix}ManuallyChosen={manual}",
        f"{prefix}SqDiffRegion=5",
        f"{prefix}VeryUnsure={unsure}",
    ]
    for axis in range(3):
        lines.append(f"{prefix}{axis}={fixed[axis]}")
        lines.append(f"{prefix}{axis}_Corresp={moving[axis]}")
        if guesses:
            lines.append(f"{prefix}{axis}_SystemGuess={moving[axis] + 1}")
    return lines


def point_pair_text(fixed_image, records, moving_image="moving.mhd"):
    lines = [f"Scan_1={fixed_image}", f"Scan_2={moving_image}"]
    for record in records:
        lines.extend(record)
    return "\n".join(lines) + "\n"


def two_point_text(fixed_image, unsure_second=0, guesses=False):
    """Two landmark pairs; the second is manually chosen and optionally very unsure."""
    return point_pair_text(
        fixed_image,
        [
            point_record(1, (1, 2, 3), (4, 5, 6), guesses=guesses),
            point_record(2, (10, 20, 30), (7, 8, 9), unsure=unsure_second, guesses=guesses),
        ],
    )


# Physical coordinates of two_point_text() with FIXED_MHD geometry
TWO_POINT_FIXED = [10.5, 22.0, 36.0, 15.0, 40.0, 90.0]
TWO_POINT_MOVING = [12.0, 25.0, 42.0, 13.5, 28.0, 48.0]

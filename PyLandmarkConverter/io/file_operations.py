import logging
import os

from ..errors import LandmarkFileError
from ..landmarks import LandmarkSet
from ..processing.adapters.registry import (
    LandmarkReaderRegistry,
    LandmarkWriterRegistry,
    check_compatibility,
)
from .output_paths import output_stem

logger = logging.getLogger(__name__)


def save_conversion_output(
    landmarks: LandmarkSet,
    output_type,
    output_folder,
    input_type,
    stem=None,
    input_path=None,
    strict=False,
):
    """
    Save converted landmarks in the requested output format.

    The fixed coordinate set is always written. For the fiducial and plain
    text formats a second file holds the moving set, but only when the
    input format supplies paired landmarks.

    Parameters
    ----------
    landmarks : LandmarkSet
        The landmarks to write.
    output_type : str
        Output format name (tfx_lmk, slr_fid or std_txt).
    output_folder : str
        The folder where the output will be saved. Created if missing.
    input_type : str
        Input format name the landmarks were read with (ix_pp or ireg).
    stem : str, optional
        Base name for the output files (default is derived from input_path,
        or from the landmark set's source path).
    input_path : str, optional
        Path of the input document, used to derive the stem.
    strict : bool, optional
        Raise instead of warning when the output folder or an output file
        cannot be created.

    Returns
    -------
    list of str
        Paths of the files that were written.
    """
    check_compatibility(input_type, output_type)
    reader_class = LandmarkReaderRegistry.get_class(input_type)
    writer = LandmarkWriterRegistry.get(output_type)

    if stem is None:
        source = input_path if input_path is not None else landmarks.source_path
        if not source:
            raise ValueError("Either stem or input_path must be given to name the output.")
        stem = output_stem(source)

    try:
        os.makedirs(output_folder, exist_ok=True)
    except OSError as e:
        if strict:
            raise LandmarkFileError(f"Failed to create output folder {output_folder}: {e}") from e
        logger.warning(f"Failed to create output folder {output_folder}; nothing was written.")
        return []

    written = []
    for which in writer.coordinate_sets(reader_class):
        path = writer.write(landmarks, stem, output_folder, which=which, strict=strict)
        if path is not None:
            written.append(str(path))
    logger.info(f"Wrote {len(written)} {output_type} file(s) to {output_folder}")
    return written

import logging
from json import JSONDecodeError
from typing import List, Optional

from .config import ConverterConfig
from .errors import LandmarkConverterError
from .io.file_operations import save_conversion_output
from .io.output_paths import output_stem
from .landmarks import LandmarkSet
from .processing.adapters.registry import LandmarkReaderRegistry


logger = logging.getLogger(__name__)


class LandmarkConverter:
    """
    Converts a landmark document from one interchange format to another.

    Methods
    -------
    __init__(...)
        Validate the input/output formats and conversion settings.
    read_landmarks()
        Read the input document into a LandmarkSet.
    save(output_folder=None)
        Write the landmarks in the output format.
    convert()
        Read and write in one step.
    """

    def __init__(
        self,
        in_file=None,
        in_type=None,
        out_dir=None,
        out_type=None,
        keep_all=True,
        strict: bool = False,
        image_root: Optional[str] = None,
        settings_file=None,
        config: Optional[ConverterConfig] = None,
    ):
        """
        Initializes the converter with the given parameters.

        Parameters
        ----------
        in_file : str, optional
            The input landmark document.
        in_type : str, optional
            Input format: 'ix_pp' (point pairs) or 'ireg' (landmark list).
        out_dir : str, optional
            Directory the output files are written to.
        out_type : str, optional
            Output format: 'tfx_lmk', 'slr_fid' or 'std_txt'.
        keep_all : bool or int, optional
            Keep (1) or discard (0) manually chosen points marked 'very unsure'.
        strict : bool, optional
            Raise on unreadable files and format mismatches instead of warning.
        image_root : str, optional
            Directory replacing the drive letter of Windows image paths.
        settings_file : str, optional
            JSON file holding the above parameters.
        config : ConverterConfig, optional
            A ready-made configuration; overrides all other arguments.

        Raises
        ------
        ValueError
            If the settings file cannot be read, a required parameter is
            missing or the conversion is not supported.
        """
        try:
            if config is not None:
                cfg = config
            elif settings_file is not None:
                cfg = ConverterConfig.from_settings_file(settings_file)
            else:
                cfg = ConverterConfig(
                    in_file=in_file,
                    in_type=in_type,
                    out_dir=out_dir,
                    out_type=out_type,
                    keep_all=keep_all,
                    strict=strict,
                    image_root=image_root,
                )
        except (FileNotFoundError, JSONDecodeError, KeyError) as e:
            raise ValueError(f"Error loading settings file: {e}")

        cfg.normalize(logger=logger)
        cfg.validate()

        self.config = cfg
        self.in_file = cfg.in_file
        self.in_type = cfg.in_type
        self.out_dir = cfg.out_dir
        self.out_type = cfg.out_type
        self.keep_all = cfg.keep_all
        self.strict = cfg.strict
        self.landmarks: Optional[LandmarkSet] = None

    @property
    def stem(self) -> str:
        return output_stem(self.in_file)

    def read_landmarks(self) -> LandmarkSet:
        """Read the input document with the reader registered for in_type."""
        logger.info("Starting conversion...")
        reader = LandmarkReaderRegistry.get(self.in_type)
        self.landmarks = reader.load(
            self.in_file,
            keep_all=self.keep_all,
            strict=self.strict,
            image_root=self.config.image_root,
            output_type=self.out_type,
        )
        return self.landmarks

    def save(self, output_folder=None) -> List[str]:
        """
        Write the landmarks read by read_landmarks().

        Parameters
        ----------
        output_folder : str, optional
            Overrides the configured output directory.

        Returns
        -------
        list of str
            Paths of the written files.
        """
        if self.landmarks is None:
            raise LandmarkConverterError(
                "No landmarks loaded. Please run read_landmarks() first."
            )
        logger.info("Starting write...")
        return save_conversion_output(
            self.landmarks,
            self.out_type,
            output_folder or self.out_dir,
            self.in_type,
            stem=self.stem,
            strict=self.strict,
        )

    def convert(self) -> List[str]:
        """Read the input and write every output file."""
        self.read_landmarks()
        written = self.save()
        logger.info("Conversion complete!")
        return written

from .compression import Compressor, compress, decompress
from .config_loader import load_config
from .container import Container, decode_container, encode_container
from .errors import EmptyInputError, HuftextError, MalformedContainerError, ResourceError
from .files import compress_file, decompress_file
from .huffman import HuffmanCompressor

__version__ = "0.1.0"

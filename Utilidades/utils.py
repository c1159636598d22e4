import logging

from CamadaFisica.sinais import BinaryUnit
from Utilidades.constantes import DEFAULTS

logger = logging.getLogger(__name__)


def char_to_binary(char, truncate=False):
    """
    Converte um único caractere em sua representação binária.
    O código Unicode é escrito em base 2 com zeros à esquerda até 8 dígitos (MSB primeiro).
    Caracteres acima de 255 mantêm todos os dígitos, a menos que 'truncate' seja True,
    caso em que só os 8 bits menos significativos são mantidos.

    Args:
        char (str): Caractere único.
        truncate (bool, opcional): Limita a representação a 8 bits.

    Returns:
        BinaryUnit: (caractere, código, bits).
    """
    if len(char) != 1:
        raise ValueError(f"Esperado um único caractere, recebido {char!r}")
    code_point = ord(char)
    bits_per_char = DEFAULTS["BITS_PER_CHAR"]
    binary = format(code_point, f"0{bits_per_char}b")
    if truncate and len(binary) > bits_per_char:
        binary = binary[-bits_per_char:]
    return BinaryUnit(char, code_point, tuple(int(digit) for digit in binary))


def text_to_binary(text, truncate=False):
    """
    Converte uma string de texto em uma lista de BinaryUnit, um por caractere.
    Primeira etapa do conversor: texto -> caracteres -> códigos -> bits.

    Args:
        text (str): Texto de entrada (pode ser vazio).
        truncate (bool, opcional): Ver char_to_binary.

    Returns:
        list[BinaryUnit]: Lista vazia para texto vazio.
    """
    units = [char_to_binary(char, truncate) for char in text]
    wide = [unit.character for unit in units if len(unit.bits) > DEFAULTS["BITS_PER_CHAR"]]
    if wide:
        logger.warning(f"text_to_binary: {len(wide)} caractere(s) acima de 8 bits mantidos com todos os dígitos: {wide}")
    logger.debug(f"text_to_binary: {len(text)} caractere(s) convertidos")
    return units


def flatten_bits(units):
    """Concatena os bits de todos os caracteres em uma única sequência contínua."""
    return [bit for unit in units for bit in unit.bits]


def bits_to_int(bits):
    """Converte uma sequência de dígitos binários (MSB primeiro) para inteiro."""
    value = 0
    for bit in bits:
        if bit not in (0, 1, '0', '1'):
            raise ValueError(f"Dígito binário inválido: {bit!r}")
        value = (value << 1) | int(bit)
    return value


def format_log(data_str, max_len=64):
    """
    Trunca strings longas no meio para facilitar visualização em logs.
    Útil para logar grandes sequências de bits de forma legível.
    """
    if len(data_str) > max_len:
        return f"{data_str[:(max_len-3)//2]}...{data_str[-(max_len-3)//2:]}"
    return data_str

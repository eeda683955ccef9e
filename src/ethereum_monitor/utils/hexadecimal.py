"""
Utility Functions For Hexadecimal Strings
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Hexadecimal strings specific utility functions used to build account addresses
from their textual form, and to render recorded bytes back.
"""
from ethereum_types.bytes import Bytes20


def has_hex_prefix(hex_string: str) -> bool:
    """
    Check if a hex string starts with hex prefix (0x).

    Parameters
    ----------
    hex_string :
        The hexadecimal string to be checked for presence of prefix.

    Returns
    -------
    has_prefix : `bool`
        Boolean indicating whether the hex string has 0x prefix.
    """
    return hex_string.startswith("0x")


def remove_hex_prefix(hex_string: str) -> str:
    """
    Remove 0x prefix from a hex string if present. This function returns the
    passed hex string if it isn't prefixed with 0x.

    Parameters
    ----------
    hex_string :
        The hexadecimal string whose prefix is to be removed.

    Returns
    -------
    modified_hex_string : `str`
        The hexadecimal string with the 0x prefix removed if present.
    """
    if has_hex_prefix(hex_string):
        return hex_string[len("0x") :]

    return hex_string


def hex_to_address(hex_string: str) -> Bytes20:
    """
    Convert hex string to a 20 byte account address, left padding with zeros.

    Parameters
    ----------
    hex_string :
        The hexadecimal string to be converted to an address.

    Returns
    -------
    address : `Bytes20`
        20-byte address corresponding to the given hexadecimal string.
    """
    return Bytes20(bytes.fromhex(remove_hex_prefix(hex_string).rjust(40, "0")))


def to_hex(data: bytes) -> str:
    """
    Render bytes as a 0x prefixed hex string.
    """
    return "0x" + data.hex()

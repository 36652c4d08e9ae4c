"""Tests pour grub_reboot/io/core_grub_cfg_parser.py - Extraction des entrées GRUB."""

from __future__ import annotations

import pytest

from grub_reboot.core_exceptions import GrubConfigReadError
from grub_reboot.io.core_grub_cfg_parser import (
    ParsedGrubCfg,
    decode_grub_cfg,
    extract_default,
    extract_menuentry_title,
    is_submenu,
    parse_grub_cfg,
)

UBUNTU_CFG = """\
### BEGIN /etc/grub.d/00_header ###
if [ -s $prefix/grubenv ]; then
  load_env
fi
if [ "${next_entry}" ] ; then
   set default="${next_entry}"
   set next_entry=
   save_env next_entry
   set boot_once=true
else
   set default="0"
fi
### BEGIN /etc/grub.d/10_linux ###
menuentry 'Ubuntu' --class ubuntu --class gnu-linux $menuentry_id_option 'gnulinux-simple-1234' {
	linux /boot/vmlinuz root=UUID=1234 ro quiet splash
}
submenu 'Advanced options for Ubuntu' $menuentry_id_option 'gnulinux-advanced-1234' {
	menuentry 'Ubuntu, with Linux 6.8.0-45-generic' --class ubuntu {
		linux /boot/vmlinuz-6.8.0-45-generic
	}
}
### BEGIN /etc/grub.d/30_os-prober ###
menuentry 'Windows Boot Manager (on /dev/nvme0n1p1)' --class windows --class os {
	chainloader /efi/Microsoft/Boot/bootmgfw.efi
}
menuentry 'UEFI Firmware Settings' $menuentry_id_option 'uefi-firmware' {
	fwsetup
}
"""


class TestExtractMenuentryTitle:
    """Tests pour extract_menuentry_title."""

    def test_single_quotes(self):
        assert extract_menuentry_title("menuentry 'Ubuntu' --class ubuntu {") == "Ubuntu"

    def test_double_quotes(self):
        assert extract_menuentry_title('menuentry "Windows" {') == "Windows"

    def test_title_stops_at_first_quote(self):
        """Le titre s'arrête à la première quote rencontrée, simple ou double."""
        assert extract_menuentry_title("menuentry \"Bob's Linux\" {") == "Bob"

    def test_indented_menuentry_ignored(self):
        """Les entrées de sous-menu (indentées) ne sont pas retenues."""
        assert extract_menuentry_title("\tmenuentry 'Ubuntu, with Linux' {") is None

    def test_is_submenu(self):
        assert is_submenu("submenu 'Advanced options for Ubuntu' {") is True
        assert is_submenu("\tsubmenu 'Nested' {") is False

    def test_submenu_ignored(self):
        assert extract_menuentry_title("submenu 'Advanced options' {") is None

    def test_empty_title_ignored(self):
        assert extract_menuentry_title("menuentry '' {") is None


class TestExtractDefault:
    """Tests pour extract_default."""

    def test_plain_title(self):
        assert extract_default('set default="Ubuntu"') == "Ubuntu"

    def test_indented(self):
        assert extract_default('   set default="0"') == "0"

    def test_allowed_characters(self):
        value = "Advanced options for Ubuntu-2 (x) /boot"
        assert extract_default(f'set default="{value}"') == value

    def test_variable_not_matched(self):
        """`${next_entry}` contient des caractères hors du jeu autorisé."""
        assert extract_default('set default="${next_entry}"') is None

    def test_unquoted_not_matched(self):
        assert extract_default("set default=0") is None

    def test_empty_value(self):
        assert extract_default('set default=""') == ""


class TestParseGrubCfg:
    """Tests pour parse_grub_cfg."""

    def test_example_from_docs(self):
        parsed = parse_grub_cfg("menuentry 'Ubuntu'\nmenuentry \"Windows\"\nset default=\"Ubuntu\"")
        assert parsed.entries == {"Ubuntu": "Ubuntu", "Windows": "Windows"}
        assert parsed.declared_default == "Ubuntu"

    def test_entries_in_file_order(self):
        titles = [f"OS {i}" for i in range(10)]
        text = "\n".join(f"menuentry '{t}' {{\n}}" for t in titles)
        parsed = parse_grub_cfg(text)
        assert list(parsed.entries) == titles
        assert len(parsed.entries) == 10

    def test_last_default_wins(self):
        text = "set default=\"A\"\nmenuentry 'A'\nmenuentry 'B'\nset default=\"B\""
        assert parse_grub_cfg(text).declared_default == "B"

    def test_no_default(self):
        parsed = parse_grub_cfg("menuentry 'A'\nmenuentry 'B'")
        assert parsed.declared_default is None

    def test_duplicate_title_keeps_first_position(self):
        parsed = parse_grub_cfg("menuentry 'A'\nmenuentry 'B'\nmenuentry 'A'")
        assert list(parsed.entries) == ["A", "B"]

    def test_empty_text(self):
        assert parse_grub_cfg("") == ParsedGrubCfg()

    def test_crlf_lines(self):
        parsed = parse_grub_cfg("menuentry 'A' {\r\nset default=\"A\"\r\n")
        assert parsed.entries == {"A": "A"}
        assert parsed.declared_default == "A"

    def test_real_world_config(self):
        parsed = parse_grub_cfg(UBUNTU_CFG)
        assert list(parsed.entries) == [
            "Ubuntu",
            "Windows Boot Manager (on /dev/nvme0n1p1)",
            "UEFI Firmware Settings",
        ]
        assert parsed.declared_default == "0"

    def test_top_level_keeps_submenu_positions(self):
        parsed = parse_grub_cfg(UBUNTU_CFG)
        assert parsed.top_level == [
            "Ubuntu",
            None,
            "Windows Boot Manager (on /dev/nvme0n1p1)",
            "UEFI Firmware Settings",
        ]


class TestDecodeGrubCfg:
    """Tests pour decode_grub_cfg."""

    def test_bytes(self):
        assert decode_grub_cfg("menuentry 'Débian'".encode()) == "menuentry 'Débian'"

    def test_bytearray(self):
        assert decode_grub_cfg(bytearray(b"abc")) == "abc"

    def test_text_passthrough(self):
        assert decode_grub_cfg("déjà décodé") == "déjà décodé"

    def test_invalid_utf8(self):
        with pytest.raises(GrubConfigReadError):
            decode_grub_cfg(b"\xff\xfe menuentry")

import logging

from bitarray import bitarray

from huffman_core import HuffmanTree
from huffman_render import (
	SAMPLE_INPUT,
	bits_to_string,
	format_code_table,
	main,
	symbols_to_string,
)


def test_bits_to_string():
	assert bits_to_string(bitarray("0110")) == "0110"
	assert bits_to_string([True, False, False]) == "100"
	assert bits_to_string([]) == ""


def test_symbols_to_string():
	assert symbols_to_string(['a', 'b', 'c']) == "abc"
	assert symbols_to_string([1, 2, 3]) == "123"


def test_format_code_table_orders_shortest_first():
	coder = HuffmanTree.from_frequencies({'f': 5, 'e': 9, 'c': 12, 'b': 13, 'd': 16, 'a': 45})
	lines = format_code_table(coder).splitlines()
	assert lines[0] == "'a'\t45\t0"
	assert lines[-1] == "'e'\t9\t1101"
	assert len(lines) == 6


def test_main_sample_input(capsys):
	assert main([]) == 0
	out = capsys.readouterr().out
	assert f"Input: \t\t{SAMPLE_INPUT}" in out
	assert f"Decoded: \t{SAMPLE_INPUT}" in out


def test_main_prints_table(capsys):
	assert main(["abracadabra", "--table"]) == 0
	out = capsys.readouterr().out
	assert "'a'\t5\t0" in out
	assert "Decoded: \tabracadabra" in out


def test_main_empty_text_fails(capsys, caplog):
	with caplog.at_level(logging.ERROR):
		assert main([""]) == 1
	assert "empty symbol sequence" in caplog.text
	assert capsys.readouterr().out == ""

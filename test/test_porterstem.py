#!/usr/bin/env python
# vim:fileencoding=utf8

"""
Tests for ``porterstem``.
"""

# These tests are intended to be run via pytest.

import argparse
import logging
import os.path
import sys

import pytest

_module_dir = os.path.dirname(__file__)
sys.path.insert(0, os.path.abspath(os.path.join(_module_dir, '..')))
import porterstem
from porterstem import stem, trace, PorterStemmer, InvalidWordError
from porterstem.__main__ import main
from porterstem.buffer import WordBuffer
from porterstem.grammar import parse_string, RuleSyntaxError
from porterstem.rules import TABLES
from porterstem.steps import step1, step6, STEPS
from porterstem.tables import Rule
from porterstem.utils import add_line_numbers, format_trace
from porterstem.vocabulary import check_files, check_vocabulary, compare_stems


VOC_IN = os.path.join(_module_dir, 'voc_in.txt')
VOC_OUT = os.path.join(_module_dir, 'voc_out.txt')


def assert_stems(tests, fun=stem):
	"""
	Test that stemming words gives the expected results.

	``tests`` is a sequence of ``(word, expected)`` pairs.
	"""
	for word, expected in tests:
		result = fun(word)
		assert result == expected, 'Wrong output for "%s": Expected "%s", got "%s".' % (
				word, expected, result)

def run_step(step, word):
	"""
	Run a single step on a word and return the result.
	"""
	buf = WordBuffer(word)
	step(buf)
	return str(buf)

def at_j(word, j):
	"""
	Create a buffer for ``word`` with ``j`` at the given position.
	"""
	buf = WordBuffer(word)
	buf.j = j
	return buf


#######################################################################
# BUFFER PRIMITIVES                                                   #
#######################################################################

def test_measure():
	assert WordBuffer('tree').m() == 0
	assert WordBuffer('trouble').m() == 1
	assert WordBuffer('troubles').m() == 2
	assert WordBuffer('by').m() == 0
	assert WordBuffer('oats').m() == 1
	assert WordBuffer('private').m() == 2
	assert WordBuffer('oaten').m() == 2
	assert WordBuffer('orrery').m() == 2

def test_measure_window():
	assert at_j('troubles', 4).m() == 1
	assert at_j('troubles', 1).m() == 0
	assert at_j('troubles', -1).m() == 0

def test_cons():
	assert WordBuffer('yes').cons(0)
	buf = WordBuffer('toy')
	assert not buf.cons(1)
	assert buf.cons(2)
	assert not WordBuffer('syzygy').cons(1)
	assert not WordBuffer('syzygy').cons(5)
	assert WordBuffer('syzygy').cons(2)
	# A run of y alternates between consonant and vowel
	buf = WordBuffer('ayyy')
	assert buf.cons(1)
	assert not buf.cons(2)
	assert buf.cons(3)
	buf = WordBuffer('yy')
	assert buf.cons(0)
	assert not buf.cons(1)
	for c in 'aeiou':
		assert not WordBuffer(c).cons(0)
	for c in 'bcdfghjklmnpqrstvwxz':
		assert WordBuffer(c).cons(0)

def test_vowelinstem():
	assert at_j('sing', 0).vowelinstem() is False
	assert at_j('sing', 1).vowelinstem() is True
	assert at_j('sky', 1).vowelinstem() is False
	assert at_j('sky', 2).vowelinstem() is True
	assert at_j('sky', -1).vowelinstem() is False

def test_doublec():
	buf = WordBuffer('hopping')
	assert buf.doublec(3)
	assert not buf.doublec(2)
	assert not buf.doublec(0)
	assert not WordBuffer('seed').doublec(2)

def test_cvc():
	assert WordBuffer('hop').cvc(2)
	assert WordBuffer('crim').cvc(3)
	assert not WordBuffer('snow').cvc(3)
	assert not WordBuffer('box').cvc(2)
	assert not WordBuffer('tray').cvc(3)
	assert not WordBuffer('fail').cvc(3)
	assert not WordBuffer('hop').cvc(1)

def test_ends():
	buf = WordBuffer('meetings')
	assert buf.ends('ings')
	assert buf.j == 3
	assert not buf.ends('ed')
	assert buf.j == 3
	assert not buf.ends('xmeetings')
	assert buf.j == 3

def test_setto():
	buf = WordBuffer('ponies')
	assert buf.ends('ies')
	buf.setto('i')
	assert str(buf) == 'poni'
	assert buf.k == 3
	buf = WordBuffer('fil')
	buf.j = buf.k
	buf.setto('e')
	assert str(buf) == 'file'
	assert buf.chars == list('file')

def test_r():
	buf = WordBuffer('rational')
	assert buf.ends('ational')
	buf.r('ate')
	assert str(buf) == 'rational'
	buf = WordBuffer('relational')
	assert buf.ends('ational')
	buf.r('ate')
	assert str(buf) == 'relate'

def test_setto_checks_boundary():
	buf = WordBuffer('abc')
	buf.j = -5
	with pytest.raises(AssertionError):
		buf.setto('x')


#######################################################################
# STEPS                                                               #
#######################################################################

def test_step1():
	assert_stems(
		(
			('caresses', 'caress'),
			('ponies', 'poni'),
			('ties', 'ti'),
			('caress', 'caress'),
			('cats', 'cat'),
			('feed', 'feed'),
			('agreed', 'agree'),
			('disabled', 'disable'),
			('matting', 'mat'),
			('mating', 'mate'),
			('meeting', 'meet'),
			('milling', 'mill'),
			('messing', 'mess'),
			('meetings', 'meet'),
			('plastered', 'plaster'),
			('bled', 'bled'),
			('sized', 'size'),
			('failing', 'fail'),
			('filing', 'file'),
		),
		lambda w: run_step(step1, w)
	)

def test_step2():
	assert run_step(STEPS[1], 'happy') == 'happi'
	assert run_step(STEPS[1], 'sky') == 'sky'

def test_step3():
	assert_stems(
		(
			('relational', 'relate'),
			('conditional', 'condition'),
			('rational', 'rational'),
			('valenci', 'valence'),
			('digitizer', 'digitize'),
			('radicalli', 'radical'),
			('vileli', 'vile'),
			('vietnamization', 'vietnamize'),
			('operator', 'operate'),
			('decisiveness', 'decisive'),
			('sensibiliti', 'sensible'),
			('archaeologi', 'archaeolog'),
		),
		lambda w: run_step(STEPS[2], w)
	)

def test_step3_short_word():
	buf = WordBuffer('ti')
	STEPS[2](buf)
	assert str(buf) == 'ti'
	buf = WordBuffer('ties')
	buf.k = 0
	STEPS[2](buf)
	assert buf.k == 0

def test_step4():
	assert_stems(
		(
			('triplicate', 'triplic'),
			('formative', 'form'),
			('formalize', 'formal'),
			('electriciti', 'electric'),
			('electrical', 'electric'),
			('hopeful', 'hope'),
			('goodness', 'good'),
		),
		lambda w: run_step(STEPS[3], w)
	)

def test_step5():
	assert_stems(
		(
			('revival', 'reviv'),
			('allowance', 'allow'),
			('inference', 'infer'),
			('airliner', 'airlin'),
			('gyroscopic', 'gyroscop'),
			('adjustable', 'adjust'),
			('defensible', 'defens'),
			('irritant', 'irrit'),
			('replacement', 'replac'),
			('adjustment', 'adjust'),
			('dependent', 'depend'),
			('adoption', 'adopt'),
			('homologou', 'homolog'),
			('communism', 'commun'),
			('activate', 'activ'),
			('angulariti', 'angular'),
			('effective', 'effect'),
			('bowdlerize', 'bowdler'),
			# Measure too small
			('feudal', 'feudal'),
			('element', 'element'),
			# -ion only after s or t
			('onion', 'onion'),
			('region', 'region'),
			# No branch for the penultimate character
			('happi', 'happi'),
		),
		lambda w: run_step(STEPS[4], w)
	)

def test_step6():
	assert_stems(
		(
			('probate', 'probat'),
			('rate', 'rate'),
			('cease', 'ceas'),
			('controll', 'control'),
			('roll', 'roll'),
		),
		lambda w: run_step(step6, w)
	)

def test_step_order():
	assert [s.__name__ for s in STEPS] == ['step%d' % i for i in range(1, 7)]


#######################################################################
# FULL STEMMER                                                        #
#######################################################################

def test_stem_examples():
	assert_stems(
		(
			('caresses', 'caress'),
			('ponies', 'poni'),
			('ties', 'ti'),
			('caress', 'caress'),
			('cats', 'cat'),
			('feed', 'feed'),
			('agreed', 'agre'),
			('disabled', 'disabl'),
			('matting', 'mat'),
			('mating', 'mate'),
			('meeting', 'meet'),
			('milling', 'mill'),
			('messing', 'mess'),
			('meetings', 'meet'),
			('generalizations', 'gener'),
			('oscillators', 'oscil'),
		)
	)

def test_short_words():
	for word in ['', 'a', 'y', 'is', 'as', 'ss', 'ed', 'ly']:
		assert stem(word) == word

def test_vocabulary_files():
	assert check_files(VOC_IN, VOC_OUT) == []

def test_stems_are_fixed_points():
	words = ['caresses', 'cats', 'meetings', 'hopping', 'falling', 'motoring',
			'generalizations', 'oscillators', 'adjustment', 'dependent',
			'relational', 'electrical', 'happy', 'conflated']
	for word in words:
		s = stem(word)
		assert stem(s) == s, 'Stem of "%s" is not a fixed point: "%s" -> "%s"' % (
				word, s, stem(s))
	# The property does not hold for every word
	assert stem('agreed') == 'agre'
	assert stem('agre') == 'agr'

def test_stem_is_prefix_preserving():
	with open(VOC_IN) as f:
		words = f.read().split()
	for word in words:
		s = stem(word)
		assert len(s) <= len(word)
		assert s[:2] == word[:2]

def test_stem_does_not_keep_state():
	assert stem('ponies') == 'poni'
	assert stem('cats') == 'cat'
	assert stem('ponies') == 'poni'

def test_invalid_words():
	for word in ['Cats', 'meeting!', 'caf\xe9', 'two words', '42']:
		with pytest.raises(InvalidWordError) as excinfo:
			stem(word)
		assert excinfo.value.word == word
	with pytest.raises(InvalidWordError) as excinfo:
		stem('Cats')
	assert excinfo.value.char == 'C'
	assert isinstance(excinfo.value, ValueError)
	with pytest.raises(TypeError):
		stem(b'cats')
	with pytest.raises(TypeError):
		stem(None)

def test_trace():
	stages = trace('generalizations')
	assert stages == [
		('input', 'generalizations'),
		('step1', 'generalization'),
		('step2', 'generalization'),
		('step3', 'generalize'),
		('step4', 'general'),
		('step5', 'gener'),
		('step6', 'gener'),
	]
	assert trace('is') == [('input', 'is')]

def test_trace_does_not_log(caplog):
	caplog.set_level(logging.DEBUG, logger='porterstem')
	trace('cats')
	assert caplog.text == ''

def test_porter_stemmer():
	stemmer = PorterStemmer()
	for ch in 'meeting':
		stemmer.add(ch)
	assert len(stemmer) == 7
	assert stemmer.stem() == 'meet'
	assert len(stemmer) == 0
	# The instance is reset, a shorter second word must not see old state
	for ch in 'cats':
		stemmer.add(ch)
	assert stemmer.stem() == 'cat'
	assert stemmer.stem() == ''
	assert stemmer.stem_word('ponies') == 'poni'
	stemmer.add('c')
	assert stemmer.stem_word('cats') == 'cat'
	assert len(stemmer) == 1

def test_porter_stemmer_rejects_invalid_characters():
	stemmer = PorterStemmer()
	stemmer.add('c')
	with pytest.raises(InvalidWordError):
		stemmer.add('A')
	with pytest.raises(TypeError):
		stemmer.add('ab')
	stemmer.reset()
	assert stemmer.stem() == ''

def test_public_interface():
	assert porterstem.stem is stem
	assert porterstem.__version__


#######################################################################
# SUFFIX RULES                                                        #
#######################################################################

def test_tables():
	assert sorted(TABLES) == ['step3', 'step4', 'step5']
	step3 = TABLES['step3']
	assert step3.offset == 1
	assert step3.threshold == 0
	assert sorted(step3.branches) == sorted('acelostg')
	assert step3.branches['o'] == [Rule('ization', 'ize'), Rule('ation', 'ate'),
			Rule('ator', 'ate')]
	step4 = TABLES['step4']
	assert step4.offset == 0
	assert step4.branches['e'][1] == Rule('ative', '')
	step5 = TABLES['step5']
	assert step5.threshold == 1
	assert [r.suffix for r in step5.branches['n']] == ['ant', 'ement', 'ment', 'ent']
	assert step5.branches['o'] == [Rule('ion', '', 'st'), Rule('ou')]

def test_rule_comparison():
	assert Rule('ion', '', 'st') == Rule('ion', '', 'st')
	assert Rule('ion', '', 'st') != Rule('ion')
	assert Rule('ou') != Rule('ou', 'o')
	assert Rule('ou') != 'ou'
	assert not (Rule('ou') != Rule('ou', ''))

def test_parse_rules():
	tables = parse_string(
		"""
		// A comment
		table plural (last, m > 0) {
			's': 'sses' -> 'ss'  'ies' -> 'i' after 'p' 't'
			  'ss'  /* kept */
		}
		table empty (penultimate, m > 3) {
		}
		"""
	)
	assert sorted(tables) == ['empty', 'plural']
	plural = tables['plural']
	assert plural.position == 'last'
	assert plural.branches == {'s': [Rule('sses', 'ss'), Rule('ies', 'i', 'pt'),
			Rule('ss', '')]}
	assert tables['empty'].threshold == 3
	assert tables['empty'].branches == {}

def test_apply_table():
	table = parse_string(
		"""
		table t (last, m > 0) {
			's': 'ies' -> 'y' after 'n'  'es' -> 'e'
		}
		"""
	)['t']
	buf = WordBuffer('ponies')
	assert table.apply(buf)
	assert str(buf) == 'pony'
	# 'ies' matches but is not preceded by 'n', so the next rule applies
	buf = WordBuffer('parties')
	assert table.apply(buf)
	assert str(buf) == 'partie'
	buf = WordBuffer('ties')
	assert not table.apply(buf)
	assert str(buf) == 'ties'
	buf = WordBuffer('cat')
	assert not table.apply(buf)

@pytest.mark.parametrize('code', [
	"table t (last, m > 0) { 'a': }",
	"table t (first, m > 0) { }",
	"table t (last, m > 0) { 'ab': 'x' }",
	"table t (last, m > 0) { 'a': '' }",
	"table t (last, m > 0) { 'a': 'Xa' }",
	"table t (last, m > 0) { 'a': 'ba' after 'bc' }",
	"table t (last, m > 0) {",
	"table table (last, m > 0) { }",
	"table t (last) { }",
])
def test_parse_errors(code):
	with pytest.raises(RuleSyntaxError):
		parse_string(code)

def test_parse_duplicates():
	with pytest.raises(RuleSyntaxError) as excinfo:
		parse_string("table t (last, m > 0) { 'a': 'ba' 'a': 'ca' }")
	assert 'Duplicate branch' in excinfo.value.msg
	with pytest.raises(RuleSyntaxError) as excinfo:
		parse_string("table t (last, m > 0) { }\ntable t (last, m > 0) { }")
	assert 'Duplicate table' in excinfo.value.msg

def test_parse_error_message():
	with pytest.raises(RuleSyntaxError) as excinfo:
		parse_string("table t (last, m > 0) {\n  'a': 'ba' -> \n}")
	e = excinfo.value
	assert e.msg.startswith('Line ')
	assert '1  table t' in str(e)


#######################################################################
# UTILITIES                                                           #
#######################################################################

def test_add_line_numbers():
	assert add_line_numbers('a\nb') == '1  a\n2  b'
	assert add_line_numbers('\n'.join('x' * 10)).splitlines()[-1] == '10  x'
	assert add_line_numbers('') == ''

def test_format_trace():
	text = format_trace([('input', 'cats'), ('step1', 'cat'), ('step2', 'cat')])
	assert text.splitlines() == [
		'cats    input',
		'cat     step1',
		'cat   = step2',
	]
	assert format_trace([]) == ''

def test_check_vocabulary():
	assert check_vocabulary(['cats', 'ponies'], ['cat', 'poni']) == []
	assert check_vocabulary(['cats', 'ponies'], ['cat', 'pony']) == [
			('ponies', 'pony', 'poni')]
	with pytest.raises(ValueError):
		check_vocabulary(['cats'], [])

def test_compare_stems():
	assert compare_stems(['cats'], ['cat'], ['cat']) == []
	assert compare_stems(['cats', 'ponies'], ['cat', 'poni'], ['cat']) == [
			('ponies', None, 'poni')]
	assert compare_stems(['cats'], ['cat'], ['cat', 'poni', 'meet']) == [
			(None, 'poni', None), (None, 'meet', None)]
	assert compare_stems(['cats'], ['cat'], ['cats']) == [('cats', 'cats', 'cat')]


#######################################################################
# COMMAND LINE                                                        #
#######################################################################

def test_main(tmpdir):
	infile = tmpdir.join('in.txt')
	infile.write('caresses\n\n  ponies \nCats\n')
	outfile = tmpdir.join('out.txt')
	assert main([str(infile), str(outfile)]) == 0
	assert outfile.read().splitlines() == ['caress', 'poni', 'Cats']

def test_main_expected(tmpdir, capsys):
	outfile = tmpdir.join('out.txt')
	assert main(['-e', VOC_OUT, VOC_IN, str(outfile)]) == 0
	assert capsys.readouterr().err.strip() == '77 passed, 0 failed.'
	expected = tmpdir.join('expected.txt')
	expected.write('caress\npony\n')
	infile = tmpdir.join('in.txt')
	infile.write('caresses\nponies\ncats\n')
	assert main(['--expected', str(expected), str(infile), str(outfile)]) == 1
	assert capsys.readouterr().err.strip().endswith('1 passed, 2 failed.')

def test_main_expected_longer_than_input(tmpdir, capsys, caplog):
	infile = tmpdir.join('in.txt')
	infile.write('cats\n')
	expected = tmpdir.join('expected.txt')
	expected.write('cat\nponi\nmeet\n')
	outfile = tmpdir.join('out.txt')
	assert main(['-e', str(expected), str(infile), str(outfile)]) == 1
	assert capsys.readouterr().err.strip().endswith('1 passed, 2 failed.')
	assert "'poni': Expected stem without input word." in caplog.text
	assert "'meet': Expected stem without input word." in caplog.text

def test_main_debug(tmpdir, caplog):
	caplog.set_level(logging.DEBUG, logger='porterstem')
	infile = tmpdir.join('in.txt')
	infile.write('cats\n')
	outfile = tmpdir.join('out.txt')
	assert main(['--debug', str(infile), str(outfile)]) == 0
	assert outfile.read() == 'cat\n'
	assert 'cat     step1' in caplog.text
	# Each step is logged exactly once
	assert caplog.text.count('step1') == 1

def test_main_closes_files(tmpdir, monkeypatch):
	opened = []
	open_file = argparse.FileType.__call__
	def recording_open(self, string):
		f = open_file(self, string)
		opened.append(f)
		return f
	monkeypatch.setattr(argparse.FileType, '__call__', recording_open)
	infile = tmpdir.join('in.txt')
	infile.write('cats\n')
	expected = tmpdir.join('expected.txt')
	expected.write('cat\n')
	outfile = tmpdir.join('out.txt')
	assert main(['-e', str(expected), str(infile), str(outfile)]) == 0
	assert len(opened) == 3
	assert all(f.closed for f in opened)
	assert outfile.read() == 'cat\n'

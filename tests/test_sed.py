# -*- coding: utf-8 -*-
"""tests for the execution cycle"""
from io import StringIO

from sedtest import PySedTestCase


class SedTests(PySedTestCase):
    """tests for Sed.apply()"""

    def test_substitute_global(self):
        self.assertEqual(self.run_sed('s/o/0/g', 'good\n'), 'g00d\n')

    def test_substitute_first(self):
        self.assertEqual(self.run_sed('s/o/0/1', 'good\n'), 'g0od\n')

    def test_delete_range(self):
        output = self.run_sed('3,5d', self.numbered_lines(10))
        self.assertEqual(output, '1\n2\n6\n7\n8\n9\n10\n')

    def test_quit(self):
        source = StringIO(self.numbered_lines(10))
        output = self.run_sed('2q/5', inputs=[source], exit_code=5)
        self.assertEqual(output, '1\n')
        # the remaining lines are never read
        self.assertEqual(source.readline(), '3\n')

    def test_quit_default_exit_code(self):
        self.assertEqual(self.run_sed('3q', self.numbered_lines(5)), '1\n2\n')

    def test_quiet_marker(self):
        self.assertEqual(self.run_sed('#n\n2p', self.numbered_lines(3)), '2\n')

    def test_no_autoprint(self):
        self.assertEqual(self.run_sed('2p', self.numbered_lines(3), no_autoprint=True), '2\n')
        self.assertEqual(self.run_sed('2p', self.numbered_lines(3)), '1\n2\n2\n3\n')

    def test_stop_skips_later_commands(self):
        self.assertEqual(self.run_sed('2d\np', self.numbered_lines(3)), '1\n1\n3\n3\n')

    def test_next(self):
        self.assertEqual(self.run_sed('n\nd', self.numbered_lines(4)), '1\n3\n')

    def test_next_counts_lines(self):
        output = self.run_sed('2n\n4p', self.numbered_lines(5))
        self.assertEqual(output, '1\n2\n4\n4\n5\n')

    def test_next_append(self):
        # the third line has no successor, so N does not stop the cycle
        self.assertEqual(self.run_sed('N', self.numbered_lines(3)), '3\n')

    def test_insert_and_append(self):
        self.assertEqual(self.run_sed('i>>\na<<', 'x\n'), '>>x\n<<\n')

    def test_append_after_delete(self):
        self.assertEqual(self.run_sed('aend\nd', '1\n2\n'), 'end\nend\n')

    def test_change(self):
        self.assertEqual(self.run_sed('2cnew', self.numbered_lines(3)), '1\nnew3\n')
        output = self.run_sed('2,4cnew', self.numbered_lines(5), no_autoprint=True)
        self.assertEqual(output, 'new')

    def test_exchange(self):
        self.assertEqual(self.run_sed('x', 'a\nb\n'), '\na\n')

    def test_hold_and_get(self):
        self.assertEqual(self.run_sed('1h\n$G', 'a\nb\nc\n'), 'a\nb\nc\na\n')

    def test_line_number(self):
        output = self.run_sed('=', 'a\nb\n')
        self.assertEqual(output, 'a\nb\n')
        self.assertEqual(self.sed.session.stdout.getvalue(), '\n1\n\n2\n')

    def test_last_line(self):
        self.assertEqual(self.run_sed('$d', '1\n2\n3\n'), '1\n2\n')
        self.assertEqual(self.run_sed('$!d', '1\n2\n3\n'), '3\n')

    def test_last_line_of_last_input(self):
        first = self.create_tempfile('first.', 'a\nb\n')
        second = self.create_tempfile('second.', 'c\nd\n')
        self.assertEqual(self.run_sed('$p', inputs=[first, second], no_autoprint=True), 'd\n')
        self.assertEqual(
            self.run_sed('$p', inputs=[first, second], no_autoprint=True, separate=True),
            'b\nd\n')

    def test_line_numbers_continue_across_inputs(self):
        first = self.create_tempfile('first.', '1\n2\n')
        second = self.create_tempfile('second.', '3\n4\n')
        self.assertEqual(self.run_sed('3d', inputs=[first, second]), '1\n2\n4\n')
        self.assertEqual(self.run_sed('1d', inputs=[first, second], separate=True), '2\n4\n')

    def test_hold_space_survives_inputs(self):
        first = self.create_tempfile('first.', 'a\n')
        second = self.create_tempfile('second.', 'b\n')
        self.assertEqual(self.run_sed('x', inputs=[first, second], separate=True), '\na\n')

    def test_hold_space_reset_per_run(self):
        sed = self.make_sed('x')
        for _ in range(2):
            output = StringIO()
            sed.apply([StringIO('a\n')], output)
            self.assertEqual(output.getvalue(), '\n')

    def test_unterminated_last_line(self):
        self.assertEqual(self.run_sed('s/x/y/', 'a\nx'), 'a\ny\n')

    def test_embedded_newlines_printed_as_lines(self):
        self.assertEqual(self.run_sed('G\nG', 'a\n'), 'a\n\n\n')

    def test_line_wrap(self):
        self.assertEqual(self.run_sed('', 'abcdefg\nab\n', line_wrap=3), 'abc\ndef\ng\nab\n')
        self.assertEqual(self.run_sed('p', 'abcdefg\n', line_wrap=3, no_autoprint=True),
                         'abcdefg\n')

    def test_output_file(self):
        name = self.create_tempfile('output.', '')
        sed = self.make_sed('s/a/b/')
        self.assertEqual(sed.apply([StringIO('aa\n')], name), 0)
        self.assertEqual(self.read_file(name), 'ba\n')

    def test_runtime_error(self):
        output = self.run_sed('p\n2b', '1\n2\n3\n', exit_code=1)
        self.assertEqual(output, '1\n1\n2\n')
        self.assertEqual(
            self.sed.stderr.getvalue(),
            "pysed error: input line 2: This command hasn't been implemented yet\n"
            "Line: 2:2\n"
            "Command: {Branch to label Cmd addr:2}\n")

    def test_missing_input_file(self):
        missing = self.temp_dir + '/missing'
        self.run_sed('p', inputs=[missing], exit_code=1)
        self.assertIn('could not open input file: ' + missing, self.sed.stderr.getvalue())

    def test_load_script(self):
        name = self.create_tempfile('script.', '#n\n/b/p\n')
        sed = self.make_sed()
        sed.load_script(name)
        output = StringIO()
        self.assertEqual(sed.apply([StringIO('a\nb\nc\n')], output), 0)
        self.assertEqual(output.getvalue(), 'b\n')

    def test_posix_regular_expressions(self):
        self.assertEqual(self.run_sed('s/[[:digit:]]/X/g', 'a1b2\n'), 'aXbX\n')
        self.assertEqual(self.run_sed('s/a|ab/X/', 'abc\n'), 'Xc\n')
        self.assertEqual(self.run_sed('/^[[:space:]]*$/d', 'a\n  \nb\n'), 'a\nb\n')

    def test_output_restored_after_apply(self):
        stdout = StringIO()
        sed = self.make_sed('s/a/z/', stdout=stdout)
        first = StringIO()
        self.assertEqual(sed.apply([StringIO('a\n')], first), 0)
        self.assertEqual(sed.apply([StringIO('b\n')]), 0)
        self.assertEqual(first.getvalue(), 'z\n')
        self.assertEqual(stdout.getvalue(), 'b\n')

    def test_output_file_closed_between_runs(self):
        name = self.create_tempfile('output.', '')
        stdout = StringIO()
        sed = self.make_sed('p', stdout=stdout, no_autoprint=True)
        self.assertEqual(sed.apply([StringIO('a\n')], name), 0)
        self.assertEqual(sed.apply([StringIO('b\n')]), 0)
        self.assertEqual(self.read_file(name), 'a\n')
        self.assertEqual(stdout.getvalue(), 'b\n')

    def test_last_line_before_empty_inputs(self):
        first = self.create_tempfile('first.', 'a\nb\n')
        empty = self.create_tempfile('empty.', '')
        output = self.run_sed('$p', inputs=[first, empty, empty], no_autoprint=True)
        self.assertEqual(output, 'b\n')
        output = self.run_sed('$p', inputs=[empty, first], no_autoprint=True)
        self.assertEqual(output, 'b\n')

    def test_carriage_returns_kept(self):
        name = self.create_tempfile('input.', 'a\r\nb\r\n')
        self.assertEqual(self.run_sed('s/a/z/', inputs=[name]), 'z\r\nb\r\n')

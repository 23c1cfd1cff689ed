import io
import unittest
from contextlib import redirect_stdout

from spotit_core.cli import main


def _run(argv):
    buf = io.StringIO()
    with redirect_stdout(buf):
        code = main(argv)
    return code, buf.getvalue()


class TestCli(unittest.TestCase):
    def test_given_prime_order_when_running_then_cards_and_pass_status(self):
        code, out = _run(['--order', '2'])
        self.assertEqual(code, 0)
        self.assertIn('Order 2: 7 cards, 3 symbols each', out)
        self.assertIn('  0: 0 2 4', out)
        self.assertIn('Verification passed!', out)

    def test_given_points_flag_when_running_then_coordinates_printed(self):
        code, out = _run(['--order', '2', '--points'])
        self.assertEqual(code, 0)
        self.assertIn('(inf,inf)', out)

    def test_given_glyphs_flag_when_running_then_symbols_printed(self):
        code, out = _run(['--order', '2', '--glyphs'])
        self.assertEqual(code, 0)
        self.assertIn('♠', out)

    def test_given_quiet_flag_when_running_then_only_status(self):
        code, out = _run(['--order', '3', '--quiet'])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), 'Verification passed!')

    def test_given_non_prime_order_when_running_then_exit_code_2(self):
        code, out = _run(['--order', '4'])
        self.assertEqual(code, 2)
        self.assertIn('error:', out)

    def test_given_non_prime_order_without_validation_when_running_then_failed_status(self):
        code, out = _run(['--order', '4', '--no-validate', '--quiet', '--log-level', 'ERROR'])
        self.assertEqual(code, 1)
        self.assertIn('Verification failed.', out)
        self.assertIn('share 2 symbols', out)


if __name__ == '__main__':
    unittest.main(verbosity=2)

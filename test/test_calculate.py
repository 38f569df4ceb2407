import io
import logging
import unittest
import contextlib

from rationals import calculate


class TestCalculate(unittest.TestCase):

    def test_calculate(self):
        self.assertEqual(calculate.calculate("1/2", "+", "1/3"), "5/6")
        self.assertEqual(calculate.calculate("1/2", "-", "1/3"), "1/6")
        self.assertEqual(calculate.calculate("1/2", "*", "1/3"), "1/6")
        self.assertEqual(calculate.calculate("1/2", "/", "1/3"), "3/2")
        self.assertEqual(calculate.calculate("1/2", "cmp", "2/3"), "-1")
        self.assertEqual(calculate.calculate("2/4", "cmp", "1/2"), "0")

    def test_calculate_invalid(self):
        with self.assertRaises(ValueError):
            calculate.calculate("1/2", "/", "0")
        with self.assertRaises(ValueError):
            calculate.calculate("1/x", "+", "1")


class TestMain(unittest.TestCase):

    def _run(self, argv):
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            calculate.main(argv)
        return stdout.getvalue().strip()

    def test_main(self):
        self.assertEqual(self._run(["117/1098", "*", "1"]), "13/122")

    def test_main_negative_operand(self):
        self.assertEqual(self._run(["--", "-1/2", "+", "-1/3"]), "-5/6")

    def test_main_invalid_operand(self):
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as cm:
                calculate.main(["1/0", "+", "1"])
        self.assertEqual(cm.exception.code, 2)

    def test_main_unknown_operator(self):
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            with self.assertRaises(SystemExit):
                calculate.main(["1", "%", "1"])

    def test_create_parser(self):
        parsed = calculate.create_parser().parse_args(["1", "+", "2", "-v"])
        self.assertTrue(parsed.verbose)
        self.assertEqual(parsed.op, "+")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    unittest.main()

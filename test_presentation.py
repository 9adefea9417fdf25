import contextlib
import io
import unittest

from symdiff import new_variable
from symdiff.demo import main
from symdiff.graph import make_graph, to_graph
from symdiff.pprinter import PPrinter, pformat


class Tests(unittest.TestCase):
    def setUp(self):
        self.x = new_variable("x")

    def test_pformat(self):
        self.assertEqual(pformat(self.x + 4),
                         "Sum (+)\n    Variable x\n    Constant 4.0")
        self.assertEqual(PPrinter(width=2).pformat(2 * (self.x / 3)),
                         "Product (*)\n"
                         "  Constant 2.0\n"
                         "  Quotient (/)\n"
                         "    Variable x\n"
                         "    Constant 3.0")

    def test_pprinter_resets_indent(self):
        pp = PPrinter()
        pp.pformat(self.x * self.x + 1)
        self.assertEqual(pp.global_indent_level, 0)

    def test_make_graph(self):
        self.assertIn("Roboto Mono", make_graph().source)

    def test_to_graph(self):
        g = to_graph(self.x * self.x + 4)
        source = g.source
        self.assertIn("Sum (+)", source)
        self.assertIn("Product (*)", source)
        self.assertEqual(source.count("Variable x"), 2)
        self.assertEqual(source.count(" -- "), 4)

    def test_demo(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            self.assertEqual(main(["--x", "10", "--y", "200"]), 0)
        lines = out.getvalue().splitlines()
        self.assertTrue(lines[1].startswith("dExpr_dx(x=10, y=200): -691.11"))
        self.assertTrue(lines[2].startswith("dExpr_dy(x=10, y=200): 106.66"))

    def test_demo_fold_only(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            main(["--fold-only"])
        self.assertIn("dExpr_dy(x=10, y=200): 106.66", out.getvalue())


if __name__ == '__main__':
    unittest.main()

import unittest
import io
import sys
import os
import shutil
from contextlib import redirect_stdout, redirect_stderr
import cv2

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.main import main

OUT_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "test_cli_out")

class TestCLI(unittest.TestCase):
    def setUp(self):
        os.makedirs(OUT_DIR, exist_ok=True)

    def tearDown(self):
        shutil.rmtree(OUT_DIR, ignore_errors=True)

    def test_generate_writes_image(self):
        path = os.path.join(OUT_DIR, "maze.png")
        main(["generate", "--width", "6", "--height", "4", "--seed", "3", "--out", path, "--stats"])
        self.assertTrue(os.path.exists(path))
        img = cv2.imread(path, cv2.IMREAD_GRAYSCALE)
        self.assertEqual(img.shape, (9, 13))

    def test_generate_scaled(self):
        path = os.path.join(OUT_DIR, "big.png")
        main(["generate", "--width", "3", "--height", "2", "--scale", "5", "--out", path])
        img = cv2.imread(path, cv2.IMREAD_GRAYSCALE)
        self.assertEqual(img.shape, (25, 35))

    def test_same_seed_same_image(self):
        a = os.path.join(OUT_DIR, "a.png")
        b = os.path.join(OUT_DIR, "b.png")
        main(["generate", "--width", "15", "--height", "15", "--seed", "9", "--out", a])
        main(["generate", "--width", "15", "--height", "15", "--seed", "9", "--out", b])
        with open(a, "rb") as fa, open(b, "rb") as fb:
            self.assertEqual(fa.read(), fb.read())

    def test_invalid_dimensions_rejected(self):
        path = os.path.join(OUT_DIR, "never.png")
        for dims in (["0", "5"], ["5", "-1"]):
            with redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit) as ctx:
                    main(["generate", "--width", dims[0], "--height", dims[1], "--out", path])
            self.assertEqual(ctx.exception.code, 2)
        self.assertFalse(os.path.exists(path))

    def test_invalid_scale_rejected(self):
        path = os.path.join(OUT_DIR, "never.png")
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main(["generate", "--width", "3", "--height", "3", "--scale", "0", "--out", path])
        self.assertFalse(os.path.exists(path))

    def test_benchmark(self):
        out = io.StringIO()
        with redirect_stdout(out):
            main(["benchmark", "--size", "20"])
        text = out.getvalue()
        self.assertIn("generate", text)
        self.assertIn("Image: 41x41 px", text)

    def test_no_command_prints_help(self):
        out = io.StringIO()
        with redirect_stdout(out):
            main([])
        self.assertIn("usage", out.getvalue())

if __name__ == '__main__':
    unittest.main()

#!/usr/bin/env python3

"""Render a JSON element tree as HTML5 canvas javascript.

Usage:
	python tools/render_canvas_script.py elements.json
	python tools/render_canvas_script.py elements.json --width 300 --height 200
	python tools/render_canvas_script.py elements.json -o page.html
	python tools/render_canvas_script.py elements.json --font-backend cairo

The input is either one element object ({"kind": "group", "children": [...]})
or a list of elements. Without -o the script is printed to stdout.
"""

# Standard Library
import argparse
import os
import sys

PACKAGE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "packages", "canvasdraw"))
if PACKAGE_DIR not in sys.path:
	sys.path.insert(0, PACKAGE_DIR)

# local repo modules
from canvasdraw import canvas_out
from canvasdraw import elements_json
from canvasdraw import render_elements


#============================================
def parse_args(argv=None):
	parser = argparse.ArgumentParser(
		description="Render a JSON element tree as HTML5 canvas javascript.",
	)
	parser.add_argument("input", help="Path to the JSON element tree")
	parser.add_argument("-o", "--output", dest="output", default=None,
		help="Write to this .js or .html file instead of stdout")
	parser.add_argument("--width", type=int, default=512, help="Canvas width (default: 512)")
	parser.add_argument("--height", type=int, default=512, help="Canvas height (default: 512)")
	parser.add_argument("--margin", type=int, default=10, help="Fit margin in pixels (default: 10)")
	parser.add_argument("--zoom", type=float, default=1.0, help="Zoom factor on the fitted scale")
	parser.add_argument("--font-size", type=int, default=16, help="Label font size in points")
	parser.add_argument("--font-name", default="Arial", help="Label font family")
	parser.add_argument("--font-backend", choices=("estimated", "cairo"), default="estimated",
		help="How label text is measured (default: estimated)")
	parser.add_argument("--no-fit", dest="fit", action="store_false",
		help="Keep scale 1.0 instead of fitting the tree into the canvas")
	return parser.parse_args(argv)


#============================================
def main(argv=None):
	args = parse_args(argv)
	if not os.path.isfile(args.input):
		print(f"Error: element file not found: {args.input}", file=sys.stderr)
		raise SystemExit(1)
	with open(args.input, "r", encoding="utf-8") as handle:
		text = handle.read()
	try:
		tree = elements_json.element_from_json_text(text)
	except ValueError as exc:
		print(f"Error: unable to load element tree: {exc}", file=sys.stderr)
		raise SystemExit(1)

	options = {
		"width": args.width,
		"height": args.height,
		"font_backend": args.font_backend,
		"font_size": args.font_size,
		"font_name": args.font_name,
		"fit": args.fit,
		"margin": args.margin,
		"zoom_factor": args.zoom,
	}
	try:
		if args.output:
			errors = canvas_out.elements_to_output(tree, args.output, **options)
			print("Wrote %d elements to %s" % (render_elements.count_elements(tree), args.output))
		else:
			script, errors = canvas_out.render_script(tree, **options)
			sys.stdout.write(script)
	except (ValueError, RuntimeError) as exc:
		print(f"Error: {exc}", file=sys.stderr)
		raise SystemExit(1)
	for message in errors:
		print(message, file=sys.stderr)
	return 0


if __name__ == "__main__":
	main()

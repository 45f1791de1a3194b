from calculator_controller import CalculatorController
import config
import sys


def _walk(keys: str):
	"""Pulsa las teclas separadas por espacios y devuelve los estados."""
	controller = CalculatorController()
	states = []

	for key in keys.split():
		controller.press(key)
		states.append((key, controller.state))

	return controller.state, states


def inspect_key_states(keys: str) -> None:
	"""Imprime el estado tras cada pulsación."""
	final, states = _walk(keys)

	print("Key inspection")
	print(f"keys:           {keys}")
	print(f"total presses:  {len(states)}")
	for i, (key, state) in enumerate(states, start=1):
		flag = "*" if state.has_pending_answer else " "
		print(f"  {i:>2}. {key:<4} {flag} {state.text!r:<24} {state.result!r}")

	print(f"final result:   {final.result!r}")


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	final, _ = _walk("2 + + 3 =")
	expected_actual.append(("2 + + 3 =", "5", final.result))
	checks.append(("repeated operator replaces instead of accumulating", final.text == "2+3"))

	final, _ = _walk("0 . 1 + 0 . 2 =")
	expected_actual.append(("0.1 + 0.2 =", "0.3", final.result))

	final, _ = _walk("2 + 3 × 4 =")
	expected_actual.append(("2 + 3 × 4 =", "14", final.result))

	final, _ = _walk("2 × ( 3 + 4 ) =")
	expected_actual.append(("2 × ( 3 + 4 ) =", "14", final.result))

	_, states = _walk("(")
	checks.append(("leading paren is ignored", states[-1][1].text == ""))

	final, _ = _walk("1 ÷ 3 =")
	expected_actual.append(("1 ÷ 3 =", "0.3333333333", final.result))

	final, _ = _walk("2 ÷ 3 =")
	expected_actual.append(("2 ÷ 3 = (half up)", "0.6666666667", final.result))

	final, _ = _walk("1 ÷ 0 =")
	expected_actual.append(("1 ÷ 0 =", config.ERROR_MARKER, final.result))
	checks.append(("division by zero leaves no pending answer", not final.has_pending_answer))

	final, _ = _walk("1 . 2 . 3 + 1 =")
	expected_actual.append(("1.2.3 + 1 =", config.ERROR_MARKER, final.result))

	final, _ = _walk("1 2 ×")
	expected_actual.append(("12 × (dangling)", "", final.result))
	final, _ = _walk("1 2 × =")
	expected_actual.append(("12 × =", "12", final.result))

	_, states = _walk("+")
	checks.append(("leading plus is ignored", states[-1][1].text == ""))
	_, states = _walk("−")
	checks.append(("leading minus becomes ascii hyphen", states[-1][1].text == "-"))

	final, _ = _walk("2 + 3 = 7")
	checks.append(("digit after answer starts a new expression", final.text == "7" and final.result == ""))

	final, _ = _walk("2 + 3 = × 2")
	checks.append(("operator after answer continues the expression", final.text == "2+3×2" and final.result == "5"))

	final, _ = _walk("1 ÷ 0 = 5")
	checks.append(("digit after error keeps editing", final.text == "1÷05"))

	final, _ = _walk("9 DEL DEL")
	checks.append(("delete on empty expression is harmless", final.text == ""))

	failed = [name for name, ok in checks if not ok]
	failed += [label for label, expected, actual in expected_actual if expected != actual]
	for name, ok in checks:
		print(f"{name}: {'OK' if ok else 'FAIL'}")

	print("\nExpected vs Actual:")
	for label, expected, actual in expected_actual:
		status = "OK" if expected == actual else "FAIL"
		print(f"- {label}: {status}")
		print(f"  expected: {expected!r}")
		print(f"  actual:   {actual!r}")

	if failed:
		print("\nFAILED CHECKS:")
		for name in failed:
			print(f"- {name}")
		raise SystemExit(1)

	print("\nAll regression checks passed.")


if __name__ == "__main__":
	# Uso rápido:
	#   python regression_checks.py
	#   python regression_checks.py --inspect "2 + + 3 ="
	if "--inspect" in sys.argv:
		try:
			keys = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing key sequence after --inspect")

		inspect_key_states(keys)
	else:
		run_regressions()

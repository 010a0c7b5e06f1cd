'''
cat day_21_input.txt | python3 day_21_1.py
'''

import sys, logging
from keypad_chain import KeypadChain, numeric_value, parse_codes

ROBOT_DEPTH = 2

logging.basicConfig(level=logging.INFO, format="%(message)s")

codes = parse_codes(sys.stdin.read())
chain = KeypadChain(ROBOT_DEPTH)

total = 0
for code in codes:
    # Small enough at this depth to build the whole thing
    presses = chain.expand_code(code)
    value = numeric_value(code)
    print(code, len(presses), value, presses)
    total += len(presses) * value
print("complexity=%d" % total)

'''
cat day_21_input.txt | python3 day_21_2.py
'''

import sys, logging
from keypad_chain import KeypadChain, parse_codes

ROBOT_DEPTH = 25

logging.basicConfig(level=logging.INFO, format="%(message)s")

codes = parse_codes(sys.stdin.read())
chain = KeypadChain(ROBOT_DEPTH)
print("codes=%s" % codes)
total = chain.complexity(codes)
print("cached hops=%d" % len(chain.evaluator.cache))
print("complexity=%d" % total)

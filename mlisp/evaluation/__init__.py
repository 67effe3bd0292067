from mlisp.evaluation.evaluator import evaluate, evaluate0

"""
Training Engines

Every engine here is pure logic:
- input: Arrow tables / numpy arrays + explicit parameters
- output: new tables, models or metric values
- no file or network I/O

Steps (nexergy.training.steps) own sequencing and context wiring;
engines own all numeric semantics.
"""

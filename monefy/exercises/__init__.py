"""Small self-contained practice exercises."""
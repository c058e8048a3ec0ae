"""Evaluations that measure how well agents edit source code."""
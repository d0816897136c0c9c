"""Page Analyzer - register urls and check whether they respond."""

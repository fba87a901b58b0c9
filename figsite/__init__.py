""" Captioned image tags and a running pace calculator for static sites """

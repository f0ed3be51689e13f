# spellrank/DB: dictionary, frequency table and resource files

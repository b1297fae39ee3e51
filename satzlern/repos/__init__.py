"""Functions that read and write each table of the practice database."""
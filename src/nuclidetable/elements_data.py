"""
Compiled-in catalog data: the neutron and the 118 elements, in Z order.

Each entry holds the keyword arguments of :class:`nuclidetable.nuclide.Nuclide`
except that ``isotopes`` is a list of tuples:

- ``(A, abundance)`` for a stable isotope;
- ``(A, abundance, decay_codes, halflife, time_unit)`` for a radioactive one,
  where ``abundance`` is None for synthetic isotopes, ``decay_codes`` uses the
  letters of ``decay.DECAY_CODES`` and ``time_unit`` is one of
  n (ns), i (μs), t (ms), s, m, h, d, y.

Abundances are percentages; 0.0 marks a trace natural isotope. Melting and
boiling points are in kelvin. ``names`` lists only the localized names that
differ from ``name``.
"""

NUCLIDE_DATA = (
    dict(
        z=0, symbol="n", name="Neutron",
        category="NONMETAL", period=0, group=0,
        melt=None, boil=None,
        weight=1,
        known=1932, credit="James Chadwick",
        naming="After Latin neuter, meaning neutral",
        isotopes=[
            (1, 0.0, "b", 610.1, "s"),
        ],
        names={"es": "Neutrón", "it": "Neutrone", "ru": "Водород"},
    ),
    dict(
        z=1, symbol="H", name="Hydrogen",
        category="NONMETAL", period=1, group=1,
        melt=13.99, boil=20.271,
        weight=1.008,
        life="BULK_ESSENTIAL",
        known=1766, credit="Henry Cavindish",
        naming="From Greek, meaning water-former",
        isotopes=[
            (1, 99.985), (2, 0.015), (3, 0.0, "b", 12.32, "y"),
        ],
        names={"de": "Wasserstoff", "es": "Hidrógeno", "fr": "Hydrogène", "it": "Hydrogène", "ru": "Нейтрон"},
    ),
    dict(
        z=2, symbol="He", name="Helium",
        category="NOBLE_GAS", period=1, group=18,
        melt=0.95, boil=4.222,
        weight=4.0026,
        known=1868, credit="Pierre Janssen, Norman Lockyer",
        naming="After Helios, Greek god of the Sun",
        isotopes=[
            (3, 0.0002), (4, 99.9998),
        ],
        names={"es": "Helio", "fr": "Hélium", "it": "Elio", "ru": "Гелий"},
    ),
    dict(
        z=3, symbol="Li", name="Lithium",
        category="ALKALI_METAL", period=2, group=1,
        melt=453.65, boil=1603.0,
        weight=6.94,
        life="TRACE_ESSENTIAL",
        known=1817, credit="Johan August Arfwedson",
        naming="From the Greek λιθoς (lithos), meaning stone",
        isotopes=[
            (6, 7.59), (7, 92.41),
        ],
        names={"es": "Litio", "it": "Litio", "ru": "Литий"},
    ),
    dict(
        z=4, symbol="Be", name="Beryllium",
        category="ALKALINE_EARTH_METAL", period=2, group=2,
        melt=1560.0, boil=2742.0,
        weight=9.0122,
        known=1798, credit="Louis Nicolas Vauquelin",
        naming="From the Greek beryllos, meaning beryl mineral",
        isotopes=[
            (7, 0.0, "eg", 53.12, "d"), (9, 100.0), (10, 0.0, "b", 1.39E6, "y"),
        ],
        names={"es": "Berilio", "fr": "Béryllium", "it": "Berillio", "ru": "Бериллий"},
    ),
    dict(
        z=5, symbol="B", name="Boron",
        category="METALLOID", period=2, group=13,
        melt=2349.0, boil=4200.0,
        weight=10.810,
        life="BENEFICIAL",
        known=1808, credit="Joseph Louis Gay-Lussac, Louis Jacques Thénard",
        naming="From the mineral borax",
        isotopes=[
            (10, 20.0), (11, 80.0),
        ],
        names={"de": "Bor", "es": "Boro", "fr": "Bore", "it": "Boro", "ru": "Бор"},
    ),
    dict(
        z=6, symbol="C", name="Carbon",
        category="NONMETAL", period=2, group=14,
        melt=3915.0, boil=3915.0,
        weight=12.011,
        life="BULK_ESSENTIAL",
        known=1789, credit="Antoine Lavoisier",
        naming="From the Latin carbo, meaning coal",
        isotopes=[
            (11, None, "p", 20.0, "m"), (12, 98.9), (13, 1.1), (14, 0.0, "b", 5730, "y"),
        ],
        names={"de": "Kohlensto", "es": "Carbono", "fr": "Carbone", "it": "Carbonio", "ru": "Углерод"},
    ),
    dict(
        z=7, symbol="N", name="Nitrogen",
        category="NONMETAL", period=2, group=15,
        melt=63.23, boil=77.355,
        weight=14.007,
        life="BULK_ESSENTIAL",
        known=1772, credit="Daniel Rutherford",
        naming="From the French nitrogène, meaning nitre-producing",
        isotopes=[
            (14, 99.6), (15, 0.4),
        ],
        names={"de": "Stickstoff", "es": "Nitrógeno", "fr": "Azote", "it": "Azoto", "ru": "Азот"},
    ),
    dict(
        z=8, symbol="O", name="Oxygen",
        category="NONMETAL", period=2, group=16,
        melt=54.36, boil=90.188,
        weight=15.999,
        life="BULK_ESSENTIAL",
        known=1771, credit="Carl Wilhelm Scheele",
        naming="From the Greek ὀξύς (oxys) and -γενής (-genēs), meaning acid-producer",
        isotopes=[
            (16, 99.76), (17, 0.04), (18, 0.20),
        ],
        names={"de": "Sauerstoff", "es": "Oxígeno", "fr": "Oxygène", "it": "Ossigeno", "ru": "Кислород"},
    ),
    dict(
        z=9, symbol="F", name="Fluorine",
        category="HALOGEN", period=2, group=17,
        melt=53.48, boil=85.03,
        weight=18.998,
        life="BENEFICIAL",
        known=1810, credit="André-Marie Ampère",
        naming="From fluoric acid",
        isotopes=[
            (18, 0.0, "pe", 109.8, "s"), (19, 100.0),
        ],
        names={"de": "Fluor", "es": "Fluor", "fr": "Fluor", "it": "Fluoro", "ru": "Фтор"},
    ),
    dict(
        z=10, symbol="Ne", name="Neon",
        category="NOBLE_GAS", period=2, group=18,
        melt=24.56, boil=27.104,
        weight=20.180,
        known=1898, credit="William Ramsay, Morris Travers",
        naming="From Latin novum via Greek, meaning new",
        isotopes=[
            (20, 90.48), (21, 0.27), (22, 9.25),
        ],
        names={"es": "Neón", "fr": "Néon", "ru": "Неон"},
    ),
    dict(
        z=11, symbol="Na", name="Sodium",
        category="ALKALI_METAL", period=3, group=1,
        melt=370.944, boil=1156.090,
        weight=22.990,
        life="BULK_ESSENTIAL",
        known=1807, credit="Humphry Davy",
        naming="Possibly from the Arabic suda, meaning headache",
        isotopes=[
            (22, 0.0, "p", 2.602, "y"), (23, 100.0), (24, 0.0, "b", 14.96, "h"),
        ],
        names={"de": "Natrium", "es": "Sodio", "it": "Sodio", "ru": "Натрий"},
    ),
    dict(
        z=12, symbol="Mg", name="Magnesium",
        category="ALKALINE_EARTH_METAL", period=3, group=2,
        melt=923.0, boil=1363.0,
        weight=24.305,
        life="BULK_ESSENTIAL",
        known=1755, credit="Joseph Black",
        naming="From the Greek word for Magnesia (now in Turkey)",
        isotopes=[
            (24, 79.0), (25, 10.0), (26, 11.0),
        ],
        names={"es": "Magnesio", "fr": "Magnésium", "it": "Magnesio", "ru": "Калий"},
    ),
    dict(
        z=13, symbol="Al", name="Aluminium",
        category="POST_TRANSITION_METAL", period=3, group=13,
        melt=933.47, boil=2743.0,
        weight=26.982,
        life="ABSORBED",
        known=1824, credit="Hans Christian Ørsted",
        naming="From the Latin alum, the mineral from which it was isolated",
        isotopes=[
            (26, 0.0, "peg", 7.17E5, "y"), (27, 100.0),
        ],
        names={"en-US": "Aluminum", "es": "Aluminio", "it": "Alluminio", "ru": "Алюминий"},
    ),
    dict(
        z=14, symbol="Si", name="Silicon",
        category="METALLOID", period=3, group=14,
        melt=1687, boil=3538,
        weight=28.085,
        life="BENEFICIAL",
        known=1823, credit="Jöns Jacob Berzelius",
        naming="From the Latin silicis, meaning flint",
        isotopes=[
            (28, 92.2), (29, 4.7), (30, 3.1), (31, 0.0, "b", 2.62, "h"),
            (32, 0.0, "b", 1.53, "y"),
        ],
        names={"de": "Silicium", "es": "Silicio", "fr": "Silicium", "it": "Silicio", "ru": "Кремний"},
    ),
    dict(
        z=15, symbol="P", name="Phosphorus",
        category="NONMETAL", period=3, group=15,
        melt=317.3, boil=553.7,  # white phosphorus
        weight=30.974,
        life="BULK_ESSENTIAL",
        known=1669, credit="Hennig Brand",
        naming="From the Greek φῶς and -φέρω, meaning light-bringer",
        isotopes=[
            (30, None, "p", 2.498, "m"), (31, 100.0), (32, 0.0, "b", 14.28, "d"),
            (33, 0.0, "b", 25.3, "d"),
        ],
        names={"de": "Phosphor", "es": "Fósforo", "fr": "Phosphore", "it": "Fosforo", "ru": "Фосфор"},
    ),
    dict(
        z=16, symbol="S", name="Sulfur",
        category="NONMETAL", period=3, group=16,
        melt=388.36, boil=717.8,
        weight=32.06,
        life="BULK_ESSENTIAL",
        known=0, credit=None,
        naming="From the Latin sulpur",
        isotopes=[
            (32, 94.99), (33, 0.75), (34, 4.25), (35, 0.0, "b", 87.37, "d"), (36, 0.01),
        ],
        names={"de": "Schwefel", "en-GB": "Sulphur", "es": "Azufre", "fr": "Soufre", "it": "Zolfo", "ru": "Сера"},
    ),
    dict(
        z=17, symbol="Cl", name="Chlorine",
        category="HALOGEN", period=3, group=17,
        melt=171.6, boil=239.11,
        weight=35.45,
        life="BULK_ESSENTIAL",
        known=1774, credit="Carl Wilhelm Scheele",
        naming="From the Greek χλωρος (chlōros), meaning green-yellow",
        isotopes=[
            (35, 76.0), (36, 0.0, "be", 3.01E5, "y"), (37, 24.0),
        ],
        names={"de": "Chlor", "es": "Cloro", "fr": "Chlore", "it": "Cloro", "ru": "Хлор"},
    ),
    dict(
        z=18, symbol="Ar", name="Argon",
        category="NOBLE_GAS", period=3, group=18,
        melt=83.81, boil=87.302,
        weight=39.95,
        known=1894, credit="Lord Rayleigh, William Ramsay",
        naming="From the Greek ἀργόν, meaning inactive",
        isotopes=[
            (36, 0.334), (37, None, "e", 35, "d"), (38, 0.063), (39, 0.0, "b", 269, "y"),
            (40, 99.604), (41, None, "b", 109.34, "s"), (42, None, "b", 32.9, "y"),
        ],
        names={"es": "Argón", "ru": "Аргон"},
    ),
    dict(
        z=19, symbol="K", name="Potassium",
        category="ALKALI_METAL", period=4, group=1,
        melt=336.7, boil=1032.0,
        weight=39.098,
        life="BULK_ESSENTIAL",
        known=1807, credit="Humphry Davy",
        naming="From placing in a pot the ash of burnt wood",
        isotopes=[
            (39, 93.258), (40, 0.0117, "pbe", 1.248E9, "y"), (41, 6.730),
        ],
        names={"de": "Kalium", "es": "Potasio", "it": "Potassio", "ru": "Калий"},
    ),
    dict(
        z=20, symbol="Ca", name="Calcium",
        category="ALKALINE_EARTH_METAL", period=4, group=2,
        melt=1115.0, boil=1757.0,
        weight=40.078,
        life="BULK_ESSENTIAL",
        known=1808, credit="Humphry Davy",
        naming="From the Latin calx, meaning lime",
        isotopes=[
            (40, 96.941), (41, 0.0, "e", 9.94E4, "y"), (42, 0.647), (43, 0.135), (44, 2.086),
            (45, None, "b", 162.6, "d"), (46, 0.004), (47, None, "bg", 4.5, "d"),
            (48, 0.187, "B", 6.4E19, "y"),
        ],
        names={"es": "Calcio", "it": "Calcio", "ru": "Кальций"},
    ),
    dict(
        z=21, symbol="Sc", name="Scandium",
        category="TRANSITION_METAL", period=4, group=3,
        melt=1814.0, boil=3109.0,
        weight=44.956,
        known=1879, credit="Lars Fredrik Nilson",
        naming="From the Latin Scandia, meaning Scandinavia",
        isotopes=[
            (44, None, "egC", 58.61, "h"), (45, 100.0), (46, None, "bg", 83.79, "d"),
            (47, None, "bg", 80.38, "d"), (48, None, "bg", 43.67, "h"),
        ],
        names={"es": "Escandio", "it": "Scandio", "ru": "Скандий"},
    ),
    dict(
        z=22, symbol="Ti", name="Titanium",
        category="TRANSITION_METAL", period=4, group=4,
        melt=1941.0, boil=3560.0,
        weight=47.867,
        known=1791, credit="William Gregor",
        naming="For the Titans of Greek mythology",
        isotopes=[
            (44, None, "eg", 63, "y"), (46, 8.25), (47, 7.44), (48, 73.72), (49, 5.41),
            (50, 5.18),
        ],
        names={"de": "Titan", "es": "Titanio", "fr": "Titane", "it": "Titanio", "ru": "Титан"},
    ),
    dict(
        z=23, symbol="V", name="Vanadium",
        category="TRANSITION_METAL", period=4, group=5,
        melt=2183.0, boil=3680.0,
        weight=50.942,
        life="BENEFICIAL",
        known=1867, credit="Henry Enfield Roscoe",
        naming="For the Scandinavian goddess of beauty and fertility, Vanadís",
        isotopes=[
            (48, None, "p", 16.0, "d"), (49, None, "e", 330.0, "d"),
            (50, 0.25, "be", 1.5E17, "y"), (51, 99.75),
        ],
        names={"es": "Vanadio", "it": "Vanadio", "ru": "Ванадий"},
    ),
    dict(
        z=24, symbol="Cr", name="Chromium",
        category="TRANSITION_METAL", period=4, group=6,
        melt=2180.0, boil=2944.0,
        weight=51.996,
        life="ABSORBED",
        known=1797, credit="Louis Nicolas Vauquelin",
        naming="From the Greek Chroma, meaing color",
        isotopes=[
            (50, 4.345), (51, None, "eg", 27.7025, "d"), (52, 83.789), (53, 9.501),
            (54, 2.365),
        ],
        names={"de": "Chrom", "es": "Cromo", "fr": "Chrome", "it": "Cromo", "ru": "Хром"},
    ),
    dict(
        z=25, symbol="Mn", name="Manganese",
        category="TRANSITION_METAL", period=4, group=7,
        melt=1519.0, boil=2334.0,
        weight=54.938,
        life="TRACE_ESSENTIAL",
        known=1774, credit="Johann Gottlieb Gahn",
        naming="From the Greek word for Magnesia (now in Turkey)",
        isotopes=[
            (52, None, "peg", 5.6, "d"), (53, 0.0, "e", 3.74E6, "y"),
            (54, None, "eg", 312.03, "d"), (55, 100.0),
        ],
        names={"de": "Mangan", "es": "Manganeso", "fr": "Manganèse", "ru": "Марганец"},
    ),
    dict(
        z=26, symbol="Fe", name="Iron",
        category="TRANSITION_METAL", period=4, group=8,
        melt=1811.0, boil=3134.0,
        weight=55.845,
        life="TRACE_ESSENTIAL",
        known=0, credit=None,
        naming="From proto-Germanic isarnan",
        isotopes=[
            (54, 5.85), (55, None, "e", 2.73, "y"), (56, 91.75), (57, 2.12), (58, 0.28),
            (59, None, "b", 44.6, "d"), (60, 0.0, "b", 2.6E6, "y"),
        ],
        names={"de": "Eisen", "es": "Hierro", "fr": "Fer", "it": "Ferro", "ru": "Железо"},
    ),
    dict(
        z=27, symbol="Co", name="Cobalt",
        category="TRANSITION_METAL", period=4, group=9,
        melt=1768.0, boil=2723.0,
        weight=58.933,
        life="TRACE_ESSENTIAL",
        known=1735, credit="Georg Brandt",
        naming="From the German kobold, meaning goblin",
        isotopes=[
            (56, None, "e", 77.27, "d"), (57, None, "e", 271.79, "d"),
            (58, None, "e", 70.86, "d"), (59, 100.0), (60, None, "bg", 5.2714, "y"),
        ],
        names={"es": "Cobalto", "it": "Cobalto", "ru": "Кобальт"},
    ),
    dict(
        z=28, symbol="Ni", name="Nickel",
        category="TRANSITION_METAL", period=4, group=10,
        melt=1728.0, boil=3003.0,
        weight=58.693,
        life="ABSORBED",
        known=1751, credit="Axel Fredrik Cronstedt",
        naming="After a mischievous sprite of German mythology, Nickel",
        isotopes=[
            (58, 68.077), (59, 0.0, "e", 7.6E4, "y"), (60, 26.223), (61, 1.140), (62, 3.635),
            (63, None, "b", 100, "y"), (64, 0.926),
        ],
        names={"es": "Niquel", "it": "Nichel", "ru": "Никель"},
    ),
    dict(
        z=29, symbol="Cu", name="Copper",
        category="TRANSITION_METAL", period=4, group=11,
        melt=1357.77, boil=2835.0,
        weight=63.546,
        life="TRACE_ESSENTIAL",
        known=0, credit=None,
        naming="From the Latin Cyprium, an alloy from Cyprus",
        isotopes=[
            (63, 69.15), (64, None, "be", 12.70, "h"), (65, 30.85),
            (67, None, "b", 61.83, "h"),
        ],
        names={"de": "Kupfer", "es": "Cobre", "fr": "Cuivre", "it": "Rame", "ru": "Медь"},
    ),
    dict(
        z=30, symbol="Zn", name="Zinc",
        category="TRANSITION_METAL", period=4, group=12,
        melt=692.68, boil=1180.0,
        weight=65.38,
        life="TRACE_ESSENTIAL",
        known=1746, credit="Andreas Sigismund Marggraf",
        naming="Probably from the German zinke, meaning pointed or jagged",
        isotopes=[
            (64, 49.2), (65, None, "eg", 244.0, "d"), (66, 27.7), (67, 4.0), (68, 18.5),
            (69, None, "b", 56.0, "m"), (70, 0.6), (71, None, "b", 2.4, "m"),
            (72, None, "b", 46.5, "h"),
        ],
        names={"de": "Zink", "it": "Zinco", "ru": "Цинк"},
    ),
    dict(
        z=31, symbol="Ga", name="Gallium",
        category="POST_TRANSITION_METAL", period=4, group=13,
        melt=302.9146, boil=2673.0,
        weight=69.723,
        known=1875, credit="Lecoq de Boisbaudran",
        naming="From Latin Gallia, meaning Gaul",
        isotopes=[
            (66, None, "p", 95, "h"), (67, None, "e", 3.3, "d"), (68, None, "p", 1.2, "h"),
            (69, 60.11), (70, None, "be", 21.0, "m"), (71, 39.89), (72, None, "b", 14.1, "h"),
            (73, None, "b", 4.9, "h"),
        ],
        names={"es": "Galio", "it": "Gallio", "ru": "Галлий"},
    ),
    dict(
        z=32, symbol="Ge", name="Germanium",
        category="METALLOID", period=4, group=14,
        melt=1211.40, boil=3106.0,
        weight=72.630,
        known=1886, credit="Clemens Winkler",
        naming="From the Latin Germania, meaning Germany",
        isotopes=[
            (68, None, "e", 270.95, "d"), (70, 20.52), (71, None, "e", 11.3, "d"), (72, 27.45),
            (73, 7.76), (74, 36.7), (76, 7.75, "B", 1.78E21, "y"),
        ],
        names={"es": "Germanio", "it": "Germanio", "ru": "Германий"},
    ),
    dict(
        z=33, symbol="As", name="Arsenic",
        category="METALLOID", period=4, group=15,
        melt=887.0, boil=887.0,
        weight=74.922,
        life="ABSORBED",
        known=0, credit=None,
        naming="From Arabic al-zarnīḵ, meaning yellow orpiment",
        isotopes=[
            (73, None, "eg", 80.3, "d"), (74, None, "pbeg", 17.8, "d"), (75, 100.0),
            (76, None, "be", 1.0942, "d"),
        ],
        names={"de": "Arsen", "es": "Arsénico", "it": "Arsenico", "ru": "Мышьяк"},
    ),
    dict(
        z=34, symbol="Se", name="Selenium",
        category="NONMETAL", period=4, group=16,
        melt=494.0, boil=958.0,
        weight=78.971,
        life="TRACE_ESSENTIAL",
        known=1817, credit="Jöns Jakob Berzelius, Johann Gottlieb Gahn",
        naming="From Greek σελήνη (selḗnē), meaning Moon",
        isotopes=[
            (72, None, "eg", 8.4, "d"), (74, 0.86), (75, None, "eg", 119.8, "d"), (76, 9.23),
            (77, 7.60), (78, 23.69), (79, 0.0, "b", 3.27E5, "y"), (80, 49.80),
            (82, 8.82, "B", 1.08E20, "y"),
        ],
        names={"de": "Selen", "es": "Selenio", "fr": "Sélénium", "it": "Selenio", "ru": "Селен"},
    ),
    dict(
        z=35, symbol="Br", name="Bromine",
        category="HALOGEN", period=4, group=17,
        melt=265.8, boil=332.0,
        weight=79.904,
        life="ABSORBED",
        known=1825, credit="Antoine Jérôme Balard, Carl Jacob Löwig",
        naming="From the Greek βρῶμος, meaning stench",
        isotopes=[
            (79, 51.0), (81, 49.0), (82, None, "b", 35.282, "h"),
        ],
        names={"de": "Brom", "es": "Bromo", "fr": "Brome", "it": "Bromo", "ru": "Бром"},
    ),
    dict(
        z=36, symbol="Kr", name="Krypton",
        category="NOBLE_GAS", period=4, group=18,
        melt=115.78, boil=119.93,
        weight=83.798,
        known=1898, credit="William Ramsay, Morris Travers",
        naming="From the Greek kryptos, meaning hidden",
        isotopes=[
            (78, 0.36, "E", 9.2E21, "y"), (79, None, "peg", 35, "h"), (80, 2.29),
            (81, 0.0, "eg", 2.3E5, "y"), (82, 11.59), (83, 11.50), (84, 56.99),
            (85, None, "b", 11, "y"), (86, 17.28),
        ],
        names={"es": "Kriptón", "it": "Kripton", "ru": "Криптон"},
    ),
    dict(
        z=37, symbol="Rb", name="Rubidium",
        category="ALKALI_METAL", period=5, group=1,
        melt=312.45, boil=961.0,
        weight=85.468,
        life="ABSORBED",
        known=1861, credit="Robert Bunsen, Gustav Kirchhoff",
        naming="From the Latin rubidus, meaning deep red",
        isotopes=[
            (83, None, "eg", 86.2, "d"), (84, None, "pbeg", 32.9, "d"), (85, 72.17),
            (86, None, "bg", 18.7, "d"), (87, 27.83, "b", 4.9E10, "y"),
        ],
        names={"es": "Rubidoo", "it": "Rubidoo", "ru": "Рубидий"},
    ),
    dict(
        z=38, symbol="Sr", name="Strontium",
        category="ALKALINE_EARTH_METAL", period=5, group=2,
        melt=1050.0, boil=1650.0,
        weight=87.62,
        life="ABSORBED",
        known=1787, credit="William Cruickshank",
        naming="From the Scottish village of Strontian",
        isotopes=[
            (82, None, "e", 25.36, "d"), (83, None, "peg", 1.35, "d"), (84, 0.56),
            (85, None, "eg", 64.84, "d"), (86, 9.86), (87, 7.0), (88, 82.58),
            (89, None, "be", 50.52, "d"), (90, 0.0, "b", 28.90, "y"),
        ],
        names={"es": "Estronzio", "it": "Stronzio", "ru": "Стронций"},
    ),
    dict(
        z=39, symbol="Y", name="Yttrium",
        category="TRANSITION_METAL", period=5, group=3,
        melt=1799.0, boil=3203.0,
        weight=88.906,
        known=1794, credit="Johan Gadolin",
        naming="After the Swedish village of Ytterby",
        isotopes=[
            (87, None, "eg", 3.4, "d"), (88, None, "eg", 106.6, "d"), (89, 100.0),
            (90, None, "bg", 2.7, "d"), (91, None, "bg", 58.5, "d"),
        ],
        names={"es": "Itrio", "it": "Ittrio", "ru": "Иттрий"},
    ),
    dict(
        z=40, symbol="Zr", name="Zirconium",
        category="TRANSITION_METAL", period=5, group=4,
        melt=2128.0, boil=4650.0,
        weight=91.224,
        known=1789, credit="Martin Heinrich Klaproth",
        naming="From the mineral zircon",
        isotopes=[
            (88, None, "eg", 83.4, "d"), (89, None, "peg", 78.4, "h"), (90, 51.45),
            (91, 11.22), (92, 17.15), (93, 0.0, "b", 1.53E6, "y"), (94, 17.38),
            (96, 2.8, "B", 2E19, "y"),
        ],
        names={"es": "Zirconio", "it": "Zirconio", "ru": "Цирконий"},
    ),
    dict(
        z=41, symbol="Nb", name="Niobium",
        category="TRANSITION_METAL", period=5, group=5,
        melt=2750.0, boil=5017.0,
        weight=92.906,
        known=1801, credit="Charles Hatchett",
        naming="From Niobe, the daughter of Tantalus",
        isotopes=[
            (90, None, "p", 15, "h"), (91, None, "e", 680, "y"), (92, 0.0, "eg", 3.47E7, "y"),
            (93, 100.0), (94, 0.0, "bg", 20.3E3, "y"), (95, None, "bg", 35.0, "d"),
            (96, None, "b", 24.0, "h"),
        ],
        names={"de": "Niob", "es": "Niobo", "it": "Niobio", "ru": "Ниобий"},
    ),
    dict(
        z=42, symbol="Mo", name="Molybdenum",
        category="TRANSITION_METAL", period=5, group=6,
        melt=2896.0, boil=4912.0,
        weight=95.95,
        life="TRACE_ESSENTIAL",
        known=1778, credit="Carl Wilhelm Scheele",
        naming="From the ore molybdena",
        isotopes=[
            (92, 14.65), (93, None, "e", 4.0E3, "y"), (94, 9.19), (95, 15.87), (96, 16.67),
            (97, 9.58), (98, 24.29), (99, None, "bg", 65.94, "h"),
            (100, 9.74, "B", 7.8E18, "y"),
        ],
        names={"de": "Molybdän", "es": "Molibdeno", "fr": "Molybdène", "it": "Molibdeno", "ru": "Молибден"},
    ),
    dict(
        z=43, symbol="Tc", name="Technetium",
        category="TRANSITION_METAL", period=5, group=7,
        melt=2430.0, boil=4538.0,
        weight=97.0,
        known=1937, credit="Emilio Segrè, Carlo Perrier",
        naming="From the Greek τεχνητός, meaning artificial",
        isotopes=[
            (95, None, "egC", 61.0, "d"), (96, None, "eg", 4.3, "d"),
            (97, None, "e", 4.21E6, "y"), (98, None, "bg", 4.2E6, "y"),
            (99, 0.0, "b", 2.111E5, "y"), (100, None, "be", 15.8, "s"),
        ],
        names={"fr": "Technétium", "es": "Tecnecio", "it": "Tecnezio", "ru": "Технеций"},
    ),
    dict(
        z=44, symbol="Ru", name="Ruthenium",
        category="TRANSITION_METAL", period=5, group=8,
        melt=2607.0, boil=4423.0,
        weight=101.07,
        known=1844, credit="Karl Ernst Claus",
        naming="From the Latin Ruthenia, meaning Russia",
        isotopes=[
            (96, 5.54), (97, None, "eg", 2.9, "d"), (98, 1.87), (99, 12.76), (100, 12.60),
            (101, 17.06), (102, 31.55), (103, None, "bg", 39.26, "d"), (104, 18.62),
            (106, None, "b", 373.59, "d"),
        ],
        names={"fr": "Ruthénium", "es": "Rutenio", "it": "Rutenio", "ru": "Рутений"},
    ),
    dict(
        z=45, symbol="Rh", name="Rhodium",
        category="TRANSITION_METAL", period=5, group=9,
        melt=2237.0, boil=3968.0,
        weight=102.91,
        known=1804, credit="William Hyde Wollaston",
        naming="From Greek ῥόδον (rhodon), meaning rose",
        isotopes=[
            (99, None, "eg", 16.1, "d"), (101, None, "egC", 4.34, "d"),
            (101, None, "eg", 3.3, "y"), (102, None, "eg", 3.7, "y"),
            (102, None, "pbeg", 207.0, "d"), (103, 100.0), (105, None, "bg", 35.36, "h"),
        ],
        names={"es": "Rodio", "it": "Rodio", "ru": "Родий"},
    ),
    dict(
        z=46, symbol="Pd", name="Palladium",
        category="TRANSITION_METAL", period=5, group=10,
        melt=1828.05, boil=3236.0,
        weight=106.42,
        known=1802, credit="William Hyde Wollaston",
        naming="After the asteroid 2 Pallas",
        isotopes=[
            (100, None, "eg", 3.63, "d"), (102, 1.02), (103, None, "e", 16.991, "d"),
            (104, 11.14), (105, 22.33), (106, 27.33), (107, 0.0, "b", 6.5E6, "y"),
            (108, 26.46), (110, 11.72),
        ],
        names={"es": "Paladio", "it": "Palladio", "ru": "Палладий"},
    ),
    dict(
        z=47, symbol="Ag", name="Silver",
        category="TRANSITION_METAL", period=5, group=11,
        melt=1234.93, boil=2435.0,
        weight=107.87,
        known=0, credit=None,
        naming="From Proto-Germanic silubra",
        isotopes=[
            (105, None, "eg", 41.2, "d"), (106, None, "eg", 8.28, "d"), (107, 51.839),
            (108, None, "egT", 418, "y"), (109, 48.161), (110, None, "bg", 249.95, "d"),
            (111, None, "bg", 7.45, "d"),
        ],
        names={"de": "Silber", "es": "Plata", "fr": "Argent", "it": "Argento", "ru": "Серебро"},
    ),
    dict(
        z=48, symbol="Cd", name="Cadmium",
        category="TRANSITION_METAL", period=5, group=12,
        melt=594.22, boil=1040.0,
        weight=112.41,
        known=1817, credit="Karl Samuel Leberecht Hermann, Friedrich Stromeyer",
        naming="From the mineral calamine named after the Greek mythological character Κάδμος (Cadmus)",
        isotopes=[
            (106, 1.25), (107, None, "e", 6.5, "h"), (108, 0.89), (109, None, "e", 462.6, "d"),
            (110, 12.47), (111, 12.80), (112, 24.11), (113, 12.23, "b", 7.7E15, "y"),
            (113, None, "bT", 14.1, "y"), (114, 28.75), (115, None, "b", 53.46, "h"),
            (116, 7.51, "B", 3.1E19, "y"),
        ],
        names={"es": "Cadmio", "it": "Cadmio", "ru": "Кадмий"},
    ),
    dict(
        z=49, symbol="In", name="Indium",
        category="POST_TRANSITION_METAL", period=5, group=13,
        melt=429.7485, boil=2345.0,
        weight=114.82,
        known=1863, credit="Ferdinand Reich, Hieronymous Theodor Richter",
        naming="From the indigo color seen in its spectrum, after the Latin indicum, meaning 'of India'",
        isotopes=[
            (111, None, "e", 2.8, "d"), (113, 4.28), (115, 95.72, "b", 4.41E14, "y"),
            (116, None, "be", 14.1, "s"),
        ],
        names={"es": "Indio", "it": "Indio", "ru": "Индий"},
    ),
    dict(
        z=50, symbol="Sn", name="Tin",
        category="POST_TRANSITION_METAL", period=5, group=14,
        melt=505.08, boil=2875.0,
        weight=118.710,
        life="ABSORBED",
        known=0, credit=None,
        naming="From proto-Germanic 'tin-om'",
        isotopes=[
            (112, 0.97), (114, 0.66), (115, 0.34), (116, 14.54), (117, 7.68), (118, 24.22),
            (119, 8.59), (120, 32.58), (122, 4.63), (124, 5.79), (126, 0.0, "b", 2.3E5, "y"),
        ],
        names={"de": "Zinn", "es": "Estaño", "fr": "Etain", "it": "Stagno", "ru": "Олово"},
    ),
    dict(
        z=51, symbol="Sb", name="Antimony",
        category="METALLOID", period=5, group=15,
        melt=903.78, boil=1908.0,
        weight=121.760,
        known=0, credit=None,
        naming="From Latin antimonium",
        isotopes=[
            (121, 57.21), (123, 42.79), (125, None, "b", 2.7582, "y"),
            (126, None, "b", 12.35, "d"),
        ],
        names={"de": "Antimon", "es": "Antimonio", "fr": "Antimoine", "it": "Antimonio", "ru": "Сурьма"},
    ),
    dict(
        z=52, symbol="Te", name="Tellurium",
        category="METALLOID", period=5, group=16,
        melt=722.66, boil=1261.0,
        weight=127.60,
        known=1782, credit="Franz-Joseph Müller von Reichenstein",
        naming="From Latin tellus, meaning 'earth'",
        isotopes=[
            (120, 0.09), (121, None, "e", 16.78, "d"), (122, 2.55), (123, 0.89), (124, 4.74),
            (125, 7.07), (126, 18.84), (127, None, "b", 9.35, "h"),
            (128, 31.74, "B", 2.2E24, "y"), (129, None, "b", 69.6, "m"),
            (130, 34.08, "B", 7.9E20, "y"),
        ],
        names={"de": "Tellur", "es": "Teluro", "fr": "Tellure", "it": "Tellurio", "ru": "Теллур"},
    ),
    dict(
        z=53, symbol="I", name="Iodine",
        category="HALOGEN", period=5, group=17,
        melt=386.85, boil=457.4,
        weight=126.9,
        life="TRACE_ESSENTIAL",
        known=1811, credit="Bernard Courtois",
        naming="From the Greek ἰοειδής (ioeidēs), meaning 'violet'",
        isotopes=[
            (123, None, "eg", 13.0, "h"), (124, None, "e", 4.176, "d"),
            (125, None, "e", 59.40, "d"), (127, 100.0), (128, None, "pb", 24.99, "m"),
            (129, 0.0, "b", 1.57E7, "y"), (130, None, "b", 12.36, "h"),
            (131, None, "bg", 8.02070, "d"), (135, None, "b", 6.57, "h"),
        ],
        names={"de": "Iod", "es": "Yodo", "fr": "Iode", "it": "Iodio", "ru": "Иод"},
    ),
    dict(
        z=54, symbol="Xe", name="Xenon",
        category="NOBLE_GAS", period=5, group=18,
        melt=161.40, boil=165.051,
        weight=131.29,
        known=1898, credit="William Ramsay, Morris Travers",
        naming="From the Greek ξένον (xénon), meaning 'foreigner'",
        isotopes=[
            (124, 0.095, "E", 1.8E22, "y"), (125, None, "e", 16.9, "h"), (126, 0.89),
            (127, None, "e", 36.345, "d"), (128, 1.910), (129, 26.401), (130, 4.071),
            (131, 21.232), (132, 26.909), (133, None, "b", 5.247, "d"), (134, 10.436),
            (135, None, "b", 9.14, "h"), (136, 8.857, "B", 2.165E21, "y"),
        ],
        names={"es": "Xénon", "fr": "Xénon", "ru": "Ксенон"},
    ),
    dict(
        z=55, symbol="Cs", name="Caesium",
        category="ALKALI_METAL", period=6, group=1,
        melt=301.7, boil=944.0,
        weight=132.91,
        known=1860, credit="Robert Bunsen, Gustav Kirchhoff",
        naming="From the Latin word caesius, meaning 'sky-blue'",
        isotopes=[
            (133, 100.0), (134, None, "be", 2.0648, "y"), (135, 0.0, "b", 2.3E6, "y"),
            (136, None, "b", 13.16, "d"), (137, None, "b", 30.17, "y"),
        ],
        names={"de": "Cäsium", "en-US": "Cesium", "es": "Cesio", "fr": "Césium", "it": "Cesio", "ru": "Цезий"},
    ),
    dict(
        z=56, symbol="Ba", name="Barium",
        category="ALKALINE_EARTH_METAL", period=6, group=2,
        melt=1000.0, boil=2118.0,
        weight=137.33,
        known=1772, credit="Carl Wilhelm Scheele",
        naming="After the mineral 'baryta'",
        isotopes=[
            (130, 0.11, "E", 0.5E21, "y"), (132, 0.10), (133, None, "e", 10.51, "y"),
            (134, 2.42), (135, 6.59), (136, 7.85), (137, 11.23), (138, 71.70),
        ],
        names={"es": "Bario", "fr": "Baryum", "it": "Bario", "ru": "Барий"},
    ),
    dict(
        z=57, symbol="La", name="Lanthanum",
        category="LANTHANOID", period=6, group=0,
        melt=1193.0, boil=3737.0,
        weight=138.91,
        known=1838, credit="Carl Gustaf Mosander",
        naming="From Greek λανθάνειν (lanthanein), meaning to lie hidden",
        isotopes=[
            (137, None, "e", 6E4, "y"), (138, 0.089, "be", 1.05E11, "y"), (139, 99.911),
        ],
        names={"de": "Lanthan", "es": "Lantano", "fr": "Lanthane", "it": "Lantanio", "ru": "Лантан"},
    ),
    dict(
        z=58, symbol="Ce", name="Cerium",
        category="LANTHANOID", period=6, group=0,
        melt=1068.0, boil=3716.0,
        weight=140.12,
        known=1803, credit="Martin Heinrich Klaproth, Jöns Jakob Berzelius, Wilhelm Hisinger",
        naming="After the dwarf planet Ceres",
        isotopes=[
            (134, None, "e", 3.16, "d"), (136, 0.186), (138, 0.251),
            (139, None, "e", 137.640, "d"), (140, 88.449), (141, None, "b", 32.501, "d"),
            (142, 11.114), (143, None, "b", 33.039, "h"), (144, None, "b", 284.893, "d"),
        ],
        names={"de": "Cer", "es": "Cerio", "fr": "Cérium", "it": "Cerio", "ru": "Церий"},
    ),
    dict(
        z=59, symbol="Pr", name="Praseodymium",
        category="LANTHANOID", period=6, group=0,
        melt=1208.0, boil=3403.0,
        weight=140.91,
        known=1885, credit="Carl Auer von Welsbach",
        naming="From the Greek πρασιος, meaning 'leek green'",
        isotopes=[
            (141, 100.0), (142, None, "be", 19.12, "h"), (143, None, "b", 13.57, "d"),
        ],
        names={"de": "Praseodym", "es": "Praseodimio", "fr": "Raséodyme", "it": "Praseodimio", "ru": "Празеодим"},
    ),
    dict(
        z=60, symbol="Nd", name="Neodymium",
        category="LANTHANOID", period=6, group=0,
        melt=1297.0, boil=3347.0,
        weight=144.24,
        known=1885, credit="Carl Auer von Welsbach",
        naming="From the Greek νέος (neos) and διδύμος (didymos), meaning 'new twin'",
        isotopes=[
            (142, 27.2), (143, 12.2), (144, 23.8, "a", 2.29E15, "y"), (145, 8.3), (146, 17.2),
            (148, 5.8, "B", 2.7E18, "y"), (150, 5.6, "B", 21.0E18, "y"),
        ],
        names={"de": "Neodym", "es": "Neodimio", "fr": "Néodyme", "it": "Neodimio", "ru": "Неодим"},
    ),
    dict(
        z=61, symbol="Pm", name="Promethium",
        category="LANTHANOID", period=6, group=0,
        melt=1315.0, boil=3273.0,
        weight=145,
        known=1942, credit="Chien Shiung Wu, Emilio Segrè, Hans Bethe",
        naming="After Prometheus, a Titan in Greek mythology",
        isotopes=[
            (145, 0.0, "e", 17.7, "y"), (146, None, "be", 5.53, "y"),
            (147, 0.0, "b", 2.6234, "y"), (148, None, "b", 5.368, "d"),
            (149, None, "b", 53.08, "h"), (150, None, "b", 2.68, "h"),
        ],
        names={"es": "Prometio", "fr": "Prométhium", "it": "Promezio", "ru": "Прометий"},
    ),
    dict(
        z=62, symbol="Sm", name="Samarium",
        category="LANTHANOID", period=6, group=0,
        melt=1345.0, boil=2173.0,
        weight=150.36,
        known=1879, credit="Lecoq de Boisbaudran",
        naming="After the mineral samarskite",
        isotopes=[
            (144, 3.08), (145, None, "e", 340.0, "d"), (146, None, "a", 6.8E7, "y"),
            (147, 15.0, "a", 1.06E11, "y"), (148, 11.25, "a", 7E15, "y"), (149, 13.82),
            (150, 7.37), (151, None, "b", 90, "y"), (152, 26.74),
            (153, None, "b", 46.284, "h"), (154, 22.74),
        ],
        names={"es": "Samario", "it": "Samario", "ru": "Самарий"},
    ),
    dict(
        z=63, symbol="Eu", name="Europium",
        category="LANTHANOID", period=6, group=0,
        melt=1099.0, boil=1802.0,
        weight=151.96,
        known=1896, credit="Eugène-Anatole Demarçay",
        naming="After the continent of Europe",
        isotopes=[
            (150, None, "e", 36.9, "y"), (151, 47.8, "a", 5E18, "y"),
            (152, None, "be", 13.54, "y"), (153, 52.2), (154, None, "b", 8.59, "y"),
            (155, None, "b", 4.76, "y"),
        ],
        names={"es": "Europio", "it": "Europio", "ru": "Европий"},
    ),
    dict(
        z=64, symbol="Gd", name="Gadolinium",
        category="LANTHANOID", period=6, group=0,
        melt=1585.0, boil=3273.0,
        weight=157.25,
        known=1880, credit="Jean Charles Galissard de Marignac",
        naming="After the mineral gadolinite, itself named for the Finnish chemist Johan Gadolin",
        isotopes=[
            (148, None, "a", 75, "y"), (150, None, "a", 1.8E6, "y"),
            (152, 0.20, "a", 1.08E14, "y"), (154, 2.18), (155, 14.80), (156, 20.47),
            (157, 15.65), (158, 24.84), (160, 21.86),
        ],
        names={"es": "Gadolinio", "it": "Gadolinio", "ru": "Гадолиний"},
    ),
    dict(
        z=65, symbol="Tb", name="Terbium",
        category="LANTHANOID", period=6, group=0,
        melt=1629.0, boil=3396.0,
        weight=158.93,
        known=1843, credit="Carl Gustaf Mosander",
        naming="After the Swedish village of Ytterby",
        isotopes=[
            (157, None, "e", 71, "y"), (158, None, "be", 180, "y"), (159, 100.0),
        ],
        names={"es": "Terbio", "it": "Terbio", "ru": "Тербий"},
    ),
    dict(
        z=66, symbol="Dy", name="Dysprosium",
        category="LANTHANOID", period=6, group=0,
        melt=1680.0, boil=2840.0,
        weight=162.500,
        known=1886, credit="Lecoq de Boisbaudran",
        naming="From the Greek δυσπρόσιτος (dysprositos), meaning 'hard to get'",
        isotopes=[
            (154, None, "a", 3.0E6, "y"), (156, 0.056), (158, 0.095), (160, 2.329),
            (161, 18.889), (162, 25.475), (163, 24.896), (164, 28.260),
        ],
        names={"es": "Disprosio", "it": "Disprosio", "ru": "Диспрозий"},
    ),
    dict(
        z=67, symbol="Ho", name="Holmium",
        category="LANTHANOID", period=6, group=0,
        melt=1734.0, boil=2873.0,
        weight=164.930,
        known=1878, credit="Jacques-Louis Soret, Marc Delafontaine",
        naming="after the Latin name for Stockholm",
        isotopes=[
            (163, None, "e", 4570, "y"), (164, None, "e", 29.0, "m"), (165, 100.0),
            (166, None, "b", 26.763, "h"), (167, None, "b", 3.1, "h"),
        ],
        names={"es": "Holmio", "it": "Olmio", "ru": "Гольмий"},
    ),
    dict(
        z=68, symbol="Er", name="Erbium",
        category="LANTHANOID", period=6, group=0,
        melt=1802.0, boil=3141.0,
        weight=167.26,
        known=1843, credit="Carl Gustaf Mosander",
        naming="After the Swedish village of Ytterby",
        isotopes=[
            (160, None, "e", 28.58, "h"), (162, 0.139), (164, 1.601),
            (165, None, "e", 10.36, "h"), (166, 33.503), (167, 22.869), (168, 26.978),
            (169, None, "b", 9.4, "d"), (170, 14.910), (171, None, "b", 7.516, "h"),
            (172, None, "b", 49.3, "h"),
        ],
        names={"es": "Erbio", "it": "Erbio", "ru": "Эрбий"},
    ),
    dict(
        z=69, symbol="Tm", name="Thulium",
        category="LANTHANOID", period=6, group=0,
        melt=1818.0, boil=2223.0,
        weight=168.93,
        known=1879, credit="Per Teodor Cleve",
        naming="after Thule, a Greek name associated with Scandinavia",
        isotopes=[
            (167, None, "e", 9.25, "d"), (168, None, "e", 93.0, "d"), (169, 100.0),
            (170, None, "b", 128.6, "d"), (171, None, "b", 1.92, "y"),
        ],
        names={"es": "Tulio", "it": "Tulio", "ru": "Тулий"},
    ),
    dict(
        z=70, symbol="Yb", name="Ytterbium",
        category="LANTHANOID", period=6, group=0,
        melt=1097.0, boil=1469.0,
        weight=173.05,
        known=1878, credit="Jean Charles Galissard de Marignac",
        naming="After the Swedish village of Ytterby",
        isotopes=[
            (166, None, "e", 56.7, "h"), (168, 0.126), (169, None, "e", 32.026, "d"),
            (170, 3.023), (171, 14.216), (172, 21.754), (173, 16.098), (174, 31.896),
            (175, None, "b", 4.185, "d"), (176, 12.887), (177, None, "b", 1.911, "h"),
        ],
        names={"es": "Iterbio", "it": "Itterbio", "ru": "Иттербий"},
    ),
    dict(
        z=71, symbol="Lu", name="Lutetium",
        category="TRANSITION_METAL", period=6, group=3,
        melt=1925.0, boil=3675.0,
        weight=174.97,
        known=1906, credit="Carl Auer von Welsbach, Georges Urbain",
        naming="From the Latin Lutetia, meaning 'Paris'",
        isotopes=[
            (173, None, "e", 1.37, "y"), (174, None, "e", 3.31, "y"), (175, 97.401),
            (176, 2.599, "b", 3.78, "y"),
        ],
        names={"es": "Lutecio", "fr": "Lutétium", "it": "Lutezio", "ru": "Лютеций"},
    ),
    dict(
        z=72, symbol="Hf", name="Hafnium",
        category="TRANSITION_METAL", period=6, group=4,
        melt=2506.0, boil=4876.0,
        weight=178.49,
        known=1922, credit="Dirk Coster, George de Hevesy",
        naming="From the Latin Hafnia, meaning 'Copenhagen'",
        isotopes=[
            (172, None, "e", 1.87, "y"), (174, 0.16, "a", 2E15, "y"), (176, 5.26),
            (177, 18.60), (178, 27.28), (178, None, "T", 31, "y"), (179, 13.62), (180, 35.08),
            (182, None, "b", 8.9E6, "y"),
        ],
        names={"es": "Hafnio", "it": "Afnio", "ru": "Гафний"},
    ),
    dict(
        z=73, symbol="Ta", name="Tantalum",
        category="TRANSITION_METAL", period=6, group=5,
        melt=3290.0, boil=5731.0,
        weight=180.95,
        known=1844, credit="Heinrich Rose",
        naming="From Tantalus, the father of Niobe in Greek mythology",
        isotopes=[
            (177, None, "e", 56.56, "h"), (178, None, "e", 2.36, "h"),
            (179, None, "e", 1.82, "y"), (180, 0.012), (180, None, "be", 8.125, "h"),
            (181, 99.988), (182, None, "b", 114.43, "d"), (183, None, "b", 5.1, "d"),
        ],
        names={"de": "Tantal", "es": "Tantalio", "fr": "Tantale", "it": "Tantalio", "ru": "Тантал"},
    ),
    dict(
        z=74, symbol="W", name="Tungsten",
        category="TRANSITION_METAL", period=6, group=6,
        melt=3695.0, boil=6203.0,
        weight=183.84,
        known=1783, credit="Juan José Elhuyar, Fausto Elhuyar",
        naming="From the Swedish word for heavy stone",
        isotopes=[
            (180, 0.12, "a", 1.8E18, "y"), (181, None, "e", 121.2, "d"), (182, 26.50),
            (183, 14.31), (184, 30.64), (185, None, "b", 75.1, "d"), (186, 28.43),
        ],
        names={"de": "Wolfram", "es": "Wolframio", "fr": "Tungstène", "it": "Tunsteno", "ru": "Вольфрам"},
    ),
    dict(
        z=75, symbol="Re", name="Rhenium",
        category="TRANSITION_METAL", period=6, group=7,
        melt=3459.0, boil=5903.0,
        weight=186.21,
        known=1908, credit="Masataka Ogawa",
        naming="From Latin Rhenus, meaning 'Rhine'",
        isotopes=[
            (185, 37.4), (187, 62.6, "b", 4.12E10, "y"),
        ],
        names={"de": "Rhénium", "es": "Renio", "it": "Renio", "ru": "Рений"},
    ),
    dict(
        z=76, symbol="Os", name="Osmium",
        category="TRANSITION_METAL", period=6, group=8,
        melt=3306.0, boil=5285.0,
        weight=190.23,
        known=1803, credit="Smithson Tennant",
        naming="After Greek osme, meaning 'a smell'",
        isotopes=[
            (184, 0.02), (185, None, "e", 93.6, "d"), (186, 1.59, "a", 2.0E15, "y"),
            (187, 1.96), (188, 13.24), (189, 16.15), (190, 26.26), (191, None, "b", 15.4, "d"),
            (192, 40.78), (193, None, "b", 30.11, "d"), (194, None, "b", 6, "y"),
        ],
        names={"es": "Osmio", "it": "Osmio", "ru": "Осмий"},
    ),
    dict(
        z=77, symbol="Ir", name="Iridium",
        category="TRANSITION_METAL", period=6, group=9,
        melt=2719.0, boil=4403.0,
        weight=192.22,
        known=1803, credit="Smithson Tennant",
        naming="After the Greek goddess Iris, personification of the rainbow",
        isotopes=[
            (188, None, "e", 1.73, "d"), (189, None, "e", 13.2, "d"),
            (190, None, "e", 11.8, "d"), (191, 37.3), (192, None, "e", 73.827, "d"),
            (192, None, "T", 241, "y"), (193, 62.7), (193, None, "T", 10.5, "d"),
            (194, None, "b", 19.3, "h"), (194, None, "T", 171.0, "d"),
        ],
        names={"es": "Iridio", "it": "Iridio", "ru": "Иридий"},
    ),
    dict(
        z=78, symbol="Pt", name="Platinum",
        category="TRANSITION_METAL", period=6, group=10,
        melt=2041.4, boil=4098.0,
        weight=195.08,
        known=1735, credit="Antonio de Ulloa",
        naming="From the Spanish platina, meaning 'silver'",
        isotopes=[
            (190, 0.012, "a", 6.5E11, "y"), (192, 0.782), (193, None, "e", 50, "y"),
            (194, 32.864), (195, 33.775), (196, 25.211), (198, 7.356),
        ],
        names={"de": "Platin", "es": "Platino", "fr": "Platine", "it": "Platino", "ru": "Платина"},
    ),
    dict(
        z=79, symbol="Au", name="Gold",
        category="TRANSITION_METAL", period=6, group=11,
        melt=1337.33, boil=3243.0,
        weight=196.97,
        known=0, credit=None,
        naming="From Proto-Germanic gulþą",
        isotopes=[
            (195, None, "e", 186.10, "d"), (196, None, "be", 6.183, "d"), (197, 100.0),
            (198, None, "b", 2.69517, "d"), (199, None, "b", 3.169, "d"),
        ],
        names={"es": "Oro", "fr": "Or", "it": "Oro", "ru": "Золото"},
    ),
    dict(
        z=80, symbol="Hg", name="Mercury",
        category="TRANSITION_METAL", period=6, group=12,
        melt=234.3210, boil=629.88,
        weight=200.59,
        known=0, credit=None,
        naming="After the Roman god Mercury",
        isotopes=[
            (194, None, "e", 444, "y"), (195, None, "e", 9.9, "h"), (196, 0.15),
            (197, None, "e", 64.14, "h"), (198, 10.04), (199, 16.94), (200, 23.14),
            (201, 13.17), (202, 29.74), (203, None, "b", 46.612, "d"), (204, 6.82),
        ],
        names={"de": "Quecksilber", "es": "Mercurio", "fr": "Mercure", "it": "Mercurio", "ru": "Ртуть"},
    ),
    dict(
        z=81, symbol="Tl", name="Thallium",
        category="POST_TRANSITION_METAL", period=6, group=13,
        melt=577.0, boil=1746.0,
        weight=204.38,
        known=1861, credit="William Crookes",
        naming="From Greek θαλλός (thallos), meaning 'a green shoot or twig'",
        isotopes=[
            (203, 29.5), (204, None, "be", 3.78, "y"), (205, 70.5),
            (206, 0.0, "b", 252.0, "s"), (210, 0.0, "b", 78.0, "s"),
        ],
        names={"es": "Talio", "it": "Tallio", "ru": "Таллий"},
    ),
    dict(
        z=82, symbol="Pb", name="Lead",
        category="POST_TRANSITION_METAL", period=6, group=14,
        melt=600.61, boil=2022.0,
        weight=207.2,
        life="ABSORBED",
        known=0, credit=None,
        naming="From the Old English lēad",
        isotopes=[
            (204, 1.4), (206, 24.1), (207, 22.1), (208, 52.4), (210, 0.0, "b", 22.3, "y"),
            (214, 0.0, "b", 26.8, "m"),
        ],
        names={"de": "Blei", "es": "Plomo", "fr": "Plomb", "it": "Piombo", "ru": "Свинец"},
    ),
    dict(
        z=83, symbol="Bi", name="Bismuth",
        category="POST_TRANSITION_METAL", period=6, group=15,
        melt=544.7, boil=1837.0,
        weight=208.98,
        known=0, credit=None,
        naming="Perhaps related to Old High German hwiz, meaning 'white'",
        isotopes=[
            (207, None, "p", 31.55, "y"), (208, None, "p", 3.68E5, "y"),
            (209, 100.0, "a", 2.01E19, "y"), (210, 0.0, "ab", 5.012, "d"),
            (210, 0.0, "ab", 5.012, "d"), (210, None, "aT", 3.04E6, "y"),
            (214, 0.0, "ab", 19.9, "m"),
        ],
        names={"de": "Bismut", "es": "Bismuto", "it": "Bismuto", "ru": "Висмут"},
    ),
    dict(
        z=84, symbol="Po", name="Polonium",
        category="POST_TRANSITION_METAL", period=6, group=16,
        melt=527.0, boil=1235.0,
        weight=209,
        known=1898, credit="Pierre Curie, Marie Curie",
        naming="After Latin Polonia, meaning Poland",
        isotopes=[
            (208, None, "ap", 2.898, "y"), (209, None, "ap", 125.2, "y"),
            (210, 0.0, "a", 138.376, "d"), (214, 0.0, "a", 164.3, "n"),
            (218, 0.0, "ab", 3.1, "m"),
        ],
        names={"es": "Polono", "it": "Polonio", "ru": "Полоний"},
    ),
    dict(
        z=85, symbol="At", name="Astatine",
        category="HALOGEN", period=6, group=17,
        melt=503.0, boil=503.0,
        weight=210,
        known=1940, credit="Dale R. Corson, Kenneth Ross MacKenzie, Emilio Segrè",
        naming="From the Greek αστατος (astatos), meaning 'unstable'",
        isotopes=[
            (209, None, "ap", 5.41, "h"), (210, None, "ap", 8.1, "h"),
            (211, None, "ae", 7.21, "h"), (217, None, "ab", 32.3, "t"),
            (218, None, "ab", 1.5, "s"), (219, None, "ab", 56.0, "s"),
        ],
        names={"de": "Astat", "es": "Astato", "fr": "Astate", "it": "Astato", "ru": "Астат"},
    ),
    dict(
        z=86, symbol="Rn", name="Radon",
        category="NOBLE_GAS", period=6, group=18,
        melt=202.0, boil=211.5,
        weight=222,
        known=1899, credit="Ernest Rutherford, Robert B. Owens",
        naming="After 'radium emanation'",
        isotopes=[
            (210, None, "a", 2.4, "h"), (211, None, "ae", 14.6, "h"),
            (219, None, "a", 3.96, "s"), (220, None, "a", 55.6, "s"),
            (222, 0.0, "a", 3.8235, "d"), (224, None, "b", 1.8, "h"),
        ],
        names={"es": "Radón", "ru": "Радон"},
    ),
    dict(
        z=87, symbol="Fr", name="Francium",
        category="ALKALI_METAL", period=7, group=1,
        melt=281.0, boil=890.0,
        weight=223,
        known=1939, credit="Marguerite Perey",
        naming="After France",
        isotopes=[
            (212, None, "ap", 20.0, "m"), (221, 0.0, "a", 4.8, "m"),
            (222, None, "b", 14.2, "m"), (223, 0.0, "ab", 22.0, "m"),
        ],
        names={"es": "Francio", "it": "Francio", "ru": "Франций"},
    ),
    dict(
        z=88, symbol="Ra", name="Radium",
        category="ALKALINE_EARTH_METAL", period=7, group=2,
        melt=973.0, boil=2010.0,
        weight=226,
        known=1898, credit="Pierre Curie, Marie Curie",
        naming="From Latin radius, meaning 'ray'",
        isotopes=[
            (223, 0.0, "a", 11.43, "d"), (224, 0.0, "a", 3.6319, "d"),
            (225, 0.0, "b", 14.9, "d"), (226, 0.0, "a", 1600, "y"), (228, 0.0, "b", 5.75, "y"),
        ],
        names={"es": "Radio", "it": "Radio", "ru": "Радий"},
    ),
    dict(
        z=89, symbol="Ac", name="Actinium",
        category="ACTINOID", period=7, group=0,
        melt=1500.0, boil=5800.0,
        weight=227,
        known=1899, credit="André-Louis Debierne",
        naming="From Greek ακτίνος (aktinos), meaning beam or ray",
        isotopes=[
            (225, 0.0, "a", 10.0, "d"), (226, None, "abe", 29.37, "h"),
            (227, 0.0, "ab", 21.772, "y"), (228, None, "b", 6.13, "h"),
        ],
        names={"es": "Actinio", "it": "Attinio", "ru": "Актиний"},
    ),
    dict(
        z=90, symbol="Th", name="Thorium",
        category="ACTINOID", period=7, group=0,
        melt=2023.0, boil=5061.0,
        weight=232.0377,
        known=1829, credit="Jöns Jakob Berzelius",
        naming="After the Norse god of thunder 'Thor'",
        isotopes=[
            (227, 0.0, "a", 18.68, "d"), (228, 0.0, "a", 1.9116, "y"),
            (229, 0.0, "a", 7917, "y"), (230, 0.02, "a", 75400, "y"),
            (231, 0.0, "b", 25.5, "h"), (232, 99.98, "a", 1.405E10, "y"),
            (234, 0.0, "b", 24.1, "d"),
        ],
        names={"es": "Torio", "it": "Torio", "ru": "Торий"},
    ),
    dict(
        z=91, symbol="Pa", name="Protactinium",
        category="ACTINOID", period=7, group=0,
        melt=1841.0, boil=4300.0,
        weight=231.03588,
        known=1913, credit="Kasimir Fajans, Oswald Helmuth Göhring",
        naming="From 'proto-actinium'",
        isotopes=[
            (229, None, "e", 1.5, "d"), (230, None, "e", 17.4, "d"),
            (231, 100.0, "a", 3.276E4, "y"), (232, 0.0, "b", 1.31, "d"),
            (233, 0.0, "b", 26.967, "d"), (234, 0.0, "b", 6.75, "h"),
            (234, 0.0, "b", 1.17, "h"),
        ],
        names={"de": "Protaktinium", "es": "Protactinio", "it": "Protoattinio", "ru": "Протактиний"},
    ),
    dict(
        z=92, symbol="U", name="Uranium",
        category="ACTINOID", period=7, group=0,
        melt=1405.3, boil=4404.0,
        weight=238.02891,
        known=1789, credit="Martin Heinrich Klaproth",
        naming="After the planet Uranus",
        isotopes=[
            (232, None, "aF", 68.9, "y"), (233, 0.0, "aF", 1.592E5, "y"),
            (234, 0.005, "aF", 2.455E5, "y"), (235, 0.720, "aF", 7.04E8, "y"),
            (236, 0.0, "aF", 2.342E7, "y"), (238, 99.274, "aBF", 4.468E9, "y"),
            (240, None, "b", 14.1, "h"),
        ],
        names={"de": "Uran", "es": "Uranio", "it": "Uranio", "ru": "Уран"},
    ),
    dict(
        z=93, symbol="Np", name="Neptunium",
        category="ACTINOID", period=7, group=0,
        melt=912.0, boil=4447.0,
        weight=237,
        known=1940, credit="Edwin McMillan and Philip H. Abelson",
        naming="After the planet Neptune",
        isotopes=[
            (235, None, "ae", 396.1, "d"), (236, None, "abe", 1.54E5, "y"),
            (237, 0.0, "a", 2.144E6, "y"), (238, None, "b", 2.117, "d"),
            (239, 0.0, "b", 2.356, "d"),
        ],
        names={"es": "Neptunio", "it": "Nettunio", "ru": "Нептуний"},
    ),
    dict(
        z=94, symbol="Pu", name="Plutonium",
        category="ACTINOID", period=7, group=0,
        melt=912.5, boil=3505.0,
        weight=244,
        known=1940, credit="Glenn T. Seaborg, Arthur Wahl, Joseph W. Kennedy, Edwin McMillan",
        naming="After the dwarf planet Pluto",
        isotopes=[
            (238, 0.0, "aF", 87.74, "y"), (239, 0.0, "aF", 2.41E4, "y"),
            (240, 0.0, "aF", 6500, "y"), (241, None, "bF", 14, "y"),
            (242, None, "aF", 3.73E5, "y"), (244, 0.0, "aF", 8.08E7, "y"),
        ],
        names={"es": "Plutonio", "it": "Plutonio", "ru": "Плутоний"},
    ),
    dict(
        z=95, symbol="Am", name="Americium",
        category="ACTINOID", period=7, group=0,
        melt=1449.0, boil=2880.0,
        weight=243,
        known=1944, credit="Glenn T. Seaborg, Ralph A. James, Leon O. Morgan, Albert Ghiorso",
        naming="After the Americas",
        isotopes=[
            (241, None, "aF", 432.2, "y"), (242, None, "aTF", 141, "y"),
            (243, None, "aF", 7370, "y"),
        ],
        names={"es": "Americio", "fr": "Américium", "it": "Americio", "ru": "Америций"},
    ),
    dict(
        z=96, symbol="Cm", name="Curium",
        category="ACTINOID", period=7, group=0,
        melt=1613.0, boil=3383.0,
        weight=247,
        known=1944, credit="Glenn T. Seaborg, Ralph A. James, Albert Ghiorso",
        naming="After Marie Skłodowska-Curie and Pierre Curie",
        isotopes=[
            (242, None, "aF", 160.0, "d"), (243, None, "aeF", 29.1, "y"),
            (244, None, "aF", 18.1, "y"), (245, None, "aF", 8500, "y"),
            (246, None, "aF", 4730, "y"), (247, None, "a", 1.56E7, "y"),
            (248, None, "aF", 3.4E5, "y"), (250, None, "abF", 9000, "y"),
        ],
        names={"es": "Curio", "it": "Curio", "ru": "Кюрий"},
    ),
    dict(
        z=97, symbol="Bk", name="Berkelium",
        category="ACTINOID", period=7, group=0,
        melt=1259.0, boil=2900.0,
        weight=247,
        known=1949, credit="Lawrence Berkeley National Laboratory",
        naming="After Berkeley, California",
        isotopes=[
            (245, None, "ae", 4.94, "d"), (246, None, "ae", 1.8, "d"),
            (247, None, "a", 1380, "y"), (248, None, "a", 300, "y"),
            (249, None, "abF", 330.0, "d"),
        ],
        names={"es": "Berkelio", "fr": "Berkélium", "it": "Berkelio", "ru": "Берклий"},
    ),
    dict(
        z=98, symbol="Cf", name="Californium",
        category="ACTINOID", period=7, group=0,
        melt=1173.0, boil=1743.0,
        weight=251,
        known=1950, credit="Lawrence Berkeley National Laboratory",
        naming="After California",
        isotopes=[
            (248, None, "aF", 333.5, "d"), (249, None, "aF", 351, "y"),
            (250, None, "aF", 13.08, "y"), (251, None, "a", 898, "y"),
            (252, None, "aF", 2.645, "y"), (253, None, "ab", 17.81, "d"),
            (254, None, "aF", 60.5, "d"),
        ],
        names={"es": "Californio", "it": "Californio", "ru": "Калифорний"},
    ),
    dict(
        z=99, symbol="Es", name="Einsteinium",
        category="ACTINOID", period=7, group=0,
        melt=1133.0, boil=1269.0,
        weight=252,
        known=1952, credit="Lawrence Berkeley National Laboratory",
        naming="After Albert Einstein",
        isotopes=[
            (252, None, "abe", 471.7, "d"), (253, None, "aF", 20.47, "d"),
            (254, None, "abe", 275.7, "d"), (255, None, "abF", 39.8, "d"),
        ],
        names={"es": "Einsteinio", "it": "Einsteinio", "ru": "Эйнштейний"},
    ),
    dict(
        z=100, symbol="Fm", name="Fermium",
        category="ACTINOID", period=7, group=0,
        melt=1800.0, boil=None,
        weight=257,
        known=1952, credit="Lawrence Berkeley National Laboratory",
        naming="After Enrico Fermi",
        isotopes=[
            (252, None, "aF", 25.39, "h"), (253, None, "ae", 3.0, "d"),
            (255, None, "aF", 20.07, "h"), (257, None, "aF", 100.5, "d"),
        ],
        names={"es": "Fermio", "it": "Fermio", "ru": "Фермий"},
    ),
    dict(
        z=101, symbol="Md", name="Mendelevium",
        category="ACTINOID", period=7, group=0,
        melt=1100.0, boil=None,
        weight=258,
        known=1955, credit="Lawrence Berkeley National Laboratory",
        naming="After Dmitri Mendeleev",
        isotopes=[
            (256, None, "e", 1.17, "h"), (257, None, "aeF", 5.52, "h"),
            (258, None, "abe", 51.5, "d"), (259, None, "aF", 1.6, "h"),
            (260, None, "abeF", 31.8, "d"),
        ],
        names={"es": "Mendelevio", "fr": "Mendelévium", "it": "Mendelevio", "ru": "Менделевий"},
    ),
    dict(
        z=102, symbol="No", name="Nobelium",
        category="ACTINOID", period=7, group=0,
        melt=1100.0, boil=None,
        weight=259,
        known=1966, credit="Joint Institute for Nuclear Research",
        naming="After Alfred Nobel",
        isotopes=[
            (253, None, "ap", 1.6, "m"), (254, None, "ap", 51.0, "s"),
            (255, None, "ap", 3.1, "m"), (257, None, "ap", 25.0, "s"),
            (259, None, "aeF", 58.0, "m"),
        ],
        names={"es": "Nobelio", "fr": "Nobélium", "it": "Nobelio", "ru": "Нобелий"},
    ),
    dict(
        z=103, symbol="Lr", name="Lawrencium",
        category="TRANSITION_METAL", period=7, group=3,
        melt=1900.0, boil=None,
        weight=266,
        known=1961, credit="Lawrence Berkeley National Laboratory, Joint Institute for Nuclear Research",
        naming="After Ernest Lawrence",
        isotopes=[
            (254, None, "ae", 13.0, "s"), (255, None, "a", 21.5, "s"),
            (256, None, "a", 27.0, "s"), (259, None, "aF", 6.2, "s"),
            (260, None, "a", 2.7, "m"), (261, None, "F", 44.0, "m"),
            (262, None, "e", 3.6, "h"), (264, None, "F", 3.0, "h"),
            (266, None, "F", 10.0, "h"),
        ],
        names={"es": "Laurencio", "it": "Laurenzio", "ru": "Лоуренсий"},
    ),
    dict(
        z=104, symbol="Rf", name="Rutherfordium",
        category="TRANSITION_METAL", period=7, group=4,
        melt=2400.0, boil=None,
        weight=267,
        known=1964, credit="Joint Institute for Nuclear Research, Lawrence Berkeley National Laboratory",
        naming="After Ernest Rutherford",
        isotopes=[
            (261, None, "aeF", 70.0, "s"), (263, None, "aF", 15.0, "m"),
            (265, None, "F", 1.1, "m"), (266, None, "F", 23.0, "s"),
            (267, None, "F", 1.3, "h"),
        ],
        names={"es": "Rutherfordio", "it": "Rutherfordio", "ru": "Резерфордий"},
    ),
    dict(
        z=105, symbol="Db", name="Dubnium",
        category="TRANSITION_METAL", period=7, group=5,
        melt=None, boil=None,
        weight=268,
        known=1970, credit="Lawrence Berkeley Laboratory, Joint Institute for Nuclear Research",
        naming="After Dubna, Moscow Oblast, Russia",
        isotopes=[
            (262, None, "aF", 34.0, "s"), (263, None, "aeF", 27.0, "s"),
            (266, None, "F", 20.0, "m"), (267, None, "F", 1.2, "h"),
            (268, None, "F", 28.0, "h"), (270, None, "aF", 15.0, "h"),
        ],
        names={"es": "Dubnio", "it": "Dubnio", "ru": "Дубний"},
    ),
    dict(
        z=106, symbol="Sg", name="Seaborgium",
        category="TRANSITION_METAL", period=7, group=6,
        melt=None, boil=None,
        weight=269,
        known=1974, credit="Lawrence Berkeley National Laboratory",
        naming="After Glenn Seaborg",
        isotopes=[
            (265, None, "a", 8.9, "s"), (267, None, "a", 1.4, "m"),
            (269, None, "a", 14.0, "m"), (271, None, "aF", 1.6, "m"),
        ],
        names={"es": "Seaborgio", "it": "Seaborgio", "ru": "Сиборгий"},
    ),
    dict(
        z=107, symbol="Bh", name="Bohrium",
        category="TRANSITION_METAL", period=7, group=7,
        melt=None, boil=None,
        weight=270,
        known=1981, credit="Gesellschaft für Schwerionenforschung",
        naming="After Niels Bohr",
        isotopes=[
            (267, None, "a", 17.0, "s"), (270, None, "a", 60.0, "s"),
            (271, None, "a", 1.5, "s"), (272, None, "a", 11.0, "s"),
            (274, None, "a", 44.0, "s"),
        ],
        names={"es": "Bohrio", "it": "Bohrio", "ru": "Борий"},
    ),
    dict(
        z=108, symbol="Hs", name="Hassium",
        category="TRANSITION_METAL", period=7, group=8,
        melt=None, boil=None,
        weight=269,
        known=1984, credit="Gesellschaft für Schwerionenforschung",
        naming="After Latin Hassia, for Hesse, Germany",
        isotopes=[
            (269, None, "a", 16.0, "s"), (271, None, "a", 9.0, "s"),
        ],
        names={"es": "Hassio", "it": "Hassio", "ru": "Хассий"},
    ),
    dict(
        z=109, symbol="Mt", name="Meitnerium",
        category="TRANSITION_METAL", period=7, group=9,
        melt=None, boil=None,
        weight=278,
        known=1982, credit="Gesellschaft für Schwerionenforschung",
        naming="After Lise Meitner",
        isotopes=[
            (274, None, "a", 0.4, "s"), (276, None, "a", 0.6, "s"), (278, None, "a", 4.0, "s"),
        ],
        names={"es": "Meitnerio", "fr": "Meitnérium", "it": "Meitnerio", "ru": "Мейтнерий"},
    ),
    dict(
        z=110, symbol="Ds", name="Darmstadtium",
        category="TRANSITION_METAL", period=7, group=10,
        melt=None, boil=None,
        weight=281,
        known=1994, credit="Gesellschaft für Schwerionenforschung",
        naming="After Darmstadt, Germany",
        isotopes=[
            (279, None, "aF", 0.2, "s"), (281, None, "aF", 14.0, "s"),
        ],
        names={"es": "Darmstadtio", "it": "Darmstadtio", "ru": "Дармштадтий"},
    ),
    dict(
        z=111, symbol="Rg", name="Roentgenium",
        category="TRANSITION_METAL", period=7, group=11,
        melt=None, boil=None,
        weight=282,
        known=1994, credit="Gesellschaft für Schwerionenforschung",
        naming="After Wilhelm Röntgen",
        isotopes=[
            (272, None, "a", 2.0, "t"), (274, None, "a", 12.0, "t"),
            (278, None, "a", 4.0, "t"), (279, None, "a", 0.09, "s"),
            (280, None, "a", 4.6, "s"), (281, None, "aF", 17.0, "s"),
            (282, None, "a", 100.0, "s"),
        ],
        names={"es": "Roentgenio", "it": "Roentgenio", "ru": "Рентгений"},
    ),
    dict(
        z=112, symbol="Cn", name="Copernicium",
        category="TRANSITION_METAL", period=7, group=12,
        melt=None, boil=None,
        weight=285,
        known=1996, credit="Gesellschaft für Schwerionenforschung",
        naming="After Nicolaus Copernicus",
        isotopes=[
            (277, None, "a", 0.69, "t"), (281, None, "a", 0.18, "s"),
            (282, None, "F", 0.91, "t"), (283, None, "aF", 4.2, "s"),
            (284, None, "aF", 98.0, "t"), (285, None, "a", 28.0, "s"),
            (286, None, "F", 8.45, "s"),
        ],
        names={"es": "Copernicio", "it": "Copernicio", "ru": "Коперниций"},
    ),
    dict(
        z=113, symbol="Nh", name="Nihonium",
        category="POST_TRANSITION_METAL", period=7, group=13,
        melt=700.0, boil=1430.0,
        weight=286,
        known=2003, credit="Joint Institute for Nuclear Research, Lawrence Livermore National Laboratory",
        naming="After Nihon (Japan)",
        isotopes=[
            (278, None, "a", 1.4, "t"), (282, None, "a", 73.0, "t"),
            (283, None, "a", 75.0, "t"), (284, None, "ae", 0.91, "s"),
            (285, None, "a", 4.2, "s"), (286, None, "a", 9.5, "s"), (287, None, "a", 5.5, "s"),
            (290, None, "a", 2.0, "s"),
        ],
        names={"es": "Nihonio", "it": "Nihonio", "ru": "Нихоний"},
    ),
    dict(
        z=114, symbol="Fl", name="Flerovium",
        category="POST_TRANSITION_METAL", period=7, group=14,
        melt=None, boil=210.0,
        weight=289,
        known=1999, credit="Joint Institute for Nuclear Research, Lawrence Livermore National Laboratory",
        naming="After Flerov Laboratory of Nuclear Reactions",
        isotopes=[
            (284, None, "F", 2.5, "t"), (285, None, "a", 0.10, "s"),
            (286, None, "aF", 0.12, "s"), (287, None, "a", 0.48, "s"),
            (288, None, "a", 0.66, "s"), (289, None, "a", 1.9, "s"),
        ],
        names={"es": "Flerovio", "fr": "Flérovium", "it": "Flerovio", "ru": "Флеровий"},
    ),
    dict(
        z=115, symbol="Mc", name="Moscovium",
        category="POST_TRANSITION_METAL", period=7, group=15,
        melt=670.0, boil=1400.0,
        weight=290,
        known=2003, credit="Joint Institute for Nuclear Research, Lawrence Livermore National Laboratory",
        naming="After Moscow",
        isotopes=[
            (287, None, "a", 37.0, "t"), (288, None, "a", 164.0, "t"),
            (289, None, "a", 330.0, "t"), (290, None, "a", 650.0, "t"),
        ],
        names={"es": "Moscovio", "it": "Moscovio", "ru": "Московий"},
    ),
    dict(
        z=116, symbol="Lv", name="Livermorium",
        category="POST_TRANSITION_METAL", period=7, group=16,
        melt=673.0, boil=1035.0,
        weight=293,
        known=2000, credit="Joint Institute for Nuclear Research, Lawrence Livermore National Laboratory",
        naming="After Lawrence Livermore National Laboratory",
        isotopes=[
            (290, None, "a", 8.3, "t"), (291, None, "a", 19.0, "t"),
            (292, None, "a", 13.0, "t"), (293, None, "a", 57.0, "t"),
            (294, None, "a", 54.0, "t"),
        ],
        names={"es": "Livermorio", "it": "Livermorio", "ru": "Ливерморий"},
    ),
    dict(
        z=117, symbol="Ts", name="Tennessine",
        category="HALOGEN", period=7, group=17,
        melt=623.0, boil=883.0,
        weight=294,
        known=2009, credit="Joint Institute for Nuclear Research, Lawrence Livermore National Laboratory, Vanderbilt University, Oak Ridge National Laboratory",
        naming="After Tennessee",
        isotopes=[
            (293, None, "a", 22.0, "t"), (294, None, "a", 51.0, "t"),
        ],
        names={"es": "Teneso", "fr": "Tennesse", "it": "Tennesso", "ru": "Теннессин"},
    ),
    dict(
        z=118, symbol="Og", name="Oganesson",
        category="NOBLE_GAS", period=7, group=18,
        melt=325.0, boil=350.0,
        weight=294,
        known=2002, credit="Joint Institute for Nuclear Research, Lawrence Livermore National Laboratory",
        naming="After Yuri Oganessian",
        isotopes=[
            (294, None, "aF", 700.0, "i"),
        ],
        names={"es": "Oganesón", "ru": "Оганесон"},
    ),
)

from reactor_reboot import Reactor, initialisation_limit, parse_input

steps = parse_input("""\
on x=-20..26,y=-36..17,z=-47..7
on x=-20..33,y=-21..23,z=-26..28
off x=-48..-32,y=26..41,z=-47..-37
on x=-54112..-39298,y=-85059..-49293,z=-27449..7877
on x=967..23432,y=45373..81175,z=27513..53682
""")

# Same steps, two questions: inside the initialisation region, and everywhere
with Reactor("array", limit=initialisation_limit()) as init:
    print("initialisation:", init.run_all(steps), "cubes in", len(init), "regions")

with Reactor() as full:
    print("full reactor:", full.run_all(steps), "cubes in", len(full), "regions")

for region in full.regions()[:5]:
    print(" ", region, region.volume())

"""
Dex Content Tables

Name lists used to build chain game pools. Formes are kept in their own
table so games can decide whether to accept them.
"""

from typing import List


POKEMON: List[str] = [
    "Bulbasaur", "Ivysaur", "Venusaur", "Charmander", "Charmeleon", "Charizard",
    "Squirtle", "Wartortle", "Blastoise", "Caterpie", "Metapod", "Butterfree",
    "Weedle", "Kakuna", "Beedrill", "Pidgey", "Pidgeotto", "Pidgeot", "Rattata",
    "Raticate", "Spearow", "Fearow", "Ekans", "Arbok", "Pikachu", "Raichu",
    "Sandshrew", "Sandslash", "Nidoran-F", "Nidorina", "Nidoqueen", "Nidoran-M",
    "Nidorino", "Nidoking", "Clefairy", "Clefable", "Vulpix", "Ninetales",
    "Jigglypuff", "Wigglytuff", "Zubat", "Golbat", "Oddish", "Gloom", "Vileplume",
    "Paras", "Parasect", "Venonat", "Venomoth", "Diglett", "Dugtrio", "Meowth",
    "Persian", "Psyduck", "Golduck", "Mankey", "Primeape", "Growlithe", "Arcanine",
    "Poliwag", "Poliwhirl", "Poliwrath", "Abra", "Kadabra", "Alakazam", "Machop",
    "Machoke", "Machamp", "Bellsprout", "Weepinbell", "Victreebel", "Tentacool",
    "Tentacruel", "Geodude", "Graveler", "Golem", "Ponyta", "Rapidash", "Slowpoke",
    "Slowbro", "Magnemite", "Magneton", "Farfetch'd", "Doduo", "Dodrio", "Seel",
    "Dewgong", "Grimer", "Muk", "Shellder", "Cloyster", "Gastly", "Haunter",
    "Gengar", "Onix", "Drowzee", "Hypno", "Krabby", "Kingler", "Voltorb",
    "Electrode", "Exeggcute", "Exeggutor", "Cubone", "Marowak", "Hitmonlee",
    "Hitmonchan", "Lickitung", "Koffing", "Weezing", "Rhyhorn", "Rhydon",
    "Chansey", "Tangela", "Kangaskhan", "Horsea", "Seadra", "Goldeen", "Seaking",
    "Staryu", "Starmie", "Mr. Mime", "Scyther", "Jynx", "Electabuzz", "Magmar",
    "Pinsir", "Tauros", "Magikarp", "Gyarados", "Lapras", "Ditto", "Eevee",
    "Vaporeon", "Jolteon", "Flareon", "Porygon", "Omanyte", "Omastar", "Kabuto",
    "Kabutops", "Aerodactyl", "Snorlax", "Articuno", "Zapdos", "Moltres",
    "Dratini", "Dragonair", "Dragonite", "Mewtwo", "Mew", "Porygon2", "Type: Null",
]

POKEMON_FORMES: List[str] = [
    "Rotom-Wash", "Rotom-Heat", "Rotom-Frost", "Rotom-Fan", "Rotom-Mow",
    "Giratina-Origin", "Shaymin-Sky", "Deoxys-Attack", "Deoxys-Defense",
    "Deoxys-Speed", "Wormadam-Sandy", "Wormadam-Trash", "Landorus-Therian",
    "Thundurus-Therian", "Tornadus-Therian", "Kyurem-Black", "Kyurem-White",
]

MOVES: List[str] = [
    "Absorb", "Acid", "Aerial Ace", "Agility", "Air Slash", "Amnesia",
    "Aqua Tail", "Aura Sphere", "Bite", "Blizzard", "Body Slam", "Brick Break",
    "Bubble Beam", "Bug Buzz", "Bulk Up", "Calm Mind", "Crunch", "Dark Pulse",
    "Dazzling Gleam", "Dig", "Dragon Claw", "Dragon Dance", "Drain Punch",
    "Earthquake", "Ember", "Energy Ball", "Extreme Speed", "Fire Blast",
    "Flamethrower", "Flash Cannon", "Fly", "Focus Blast", "Giga Drain",
    "Gunk Shot", "Headbutt", "Hidden Power", "Hydro Pump", "Hyper Beam",
    "Ice Beam", "Iron Head", "Leaf Storm", "Leech Seed", "Moonblast",
    "Nasty Plot", "Night Slash", "Outrage", "Poison Jab", "Protect", "Psychic",
    "Quick Attack", "Rapid Spin", "Recover", "Rest", "Roost", "Scald",
    "Shadow Ball", "Sludge Bomb", "Spikes", "Stealth Rock", "Stone Edge",
    "Surf", "Swords Dance", "Tackle", "Thunderbolt", "Toxic", "U-turn",
    "Volt Switch", "Will-O-Wisp", "X-Scissor", "Zen Headbutt",
]

ITEMS: List[str] = [
    "Assault Vest", "Big Root", "Black Sludge", "Bright Powder", "Charcoal",
    "Choice Band", "Choice Scarf", "Choice Specs", "Damp Rock", "Eviolite",
    "Expert Belt", "Flame Orb", "Focus Sash", "Heat Rock", "Heavy-Duty Boots",
    "Icy Rock", "Kings Rock", "Lagging Tail", "Leftovers", "Life Orb",
    "Light Clay", "Lum Berry", "Mental Herb", "Metronome", "Muscle Band",
    "Mystic Water", "Never-Melt Ice", "Oran Berry", "Poison Barb", "Power Herb",
    "Quick Claw", "Razor Fang", "Red Card", "Rocky Helmet", "Safety Goggles",
    "Scope Lens", "Sitrus Berry", "Smooth Rock", "Soft Sand", "Toxic Orb",
    "Twisted Spoon", "Weakness Policy", "White Herb", "Wide Lens", "Zoom Lens",
]

ABILITIES: List[str] = [
    "Adaptability", "Aftermath", "Analytic", "Anger Point", "Arena Trap",
    "Bad Dreams", "Battle Armor", "Blaze", "Chlorophyll", "Clear Body",
    "Competitive", "Compound Eyes", "Contrary", "Cursed Body", "Defiant",
    "Download", "Drizzle", "Drought", "Dry Skin", "Early Bird", "Effect Spore",
    "Flash Fire", "Frisk", "Guts", "Huge Power", "Hustle", "Hydration",
    "Intimidate", "Iron Fist", "Justified", "Levitate", "Magic Guard",
    "Mold Breaker", "Moxie", "Multiscale", "Natural Cure", "Overgrow",
    "Poison Heal", "Prankster", "Pressure", "Regenerator", "Rough Skin",
    "Sand Stream", "Serene Grace", "Sheer Force", "Speed Boost", "Sturdy",
    "Swift Swim", "Synchronize", "Technician", "Torrent", "Unaware",
    "Volt Absorb", "Water Absorb", "Wonder Guard",
]

from lucid.interpreter import interpret


def test_program_4_top_level_return(read_example):
    # The return on line 3 stops the program before `never` is bound
    result = interpret(read_example('program_4.lucid'))
    assert result == 11
